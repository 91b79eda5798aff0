"""Shared fixtures for the VoxMind test suite."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest


@pytest.fixture
def capitals_record() -> dict:
    return {
        "id": "q1",
        "title": "Capitals",
        "subtitle": "Europe",
        "time": "2",
        "questionList": [
            {
                "question": "Capital of France?",
                "options": ["Berlin", "Madrid", "Paris", "Rome"],
                "correct": "Paris",
            },
            {
                "question": "Capital of Italy?",
                "options": ["Rome", "Milan", "Turin", "Naples"],
                "correct": "Rome",
            },
        ],
    }


@pytest.fixture
def maths_record() -> dict:
    return {
        "id": "q2",
        "title": "Maths",
        "subtitle": "Arithmetic",
        "time": "1",
        "questionList": [
            {"question": "2 + 2?", "options": ["3", "4", "5", "22"], "correct": "4"},
        ],
    }


@pytest.fixture
def root_document(capitals_record, maths_record) -> dict:
    return {"0": capitals_record, "1": maths_record}


@pytest.fixture
def store_file(tmp_path: Path, root_document) -> Path:
    path = tmp_path / "quizzes.json"
    path.write_text(json.dumps(root_document), encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance() or widgets.QApplication([])
    yield app
