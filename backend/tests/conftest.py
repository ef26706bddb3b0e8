"""
Test configuration and fixtures
"""

import json
import os
import re
import sys
import tempfile

import pytest

# Add backend to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Keep the database, logs and config of a test run out of the project tree
_TEST_BASE_DIR = tempfile.mkdtemp(prefix="homework_grader_tests_")
os.environ["DATA_DIR"] = os.path.join(_TEST_BASE_DIR, "data")
os.environ["LOGS_DIR"] = os.path.join(_TEST_BASE_DIR, "logs")
os.environ["HOMEWORK_GRADER_CONFIG"] = os.path.join(_TEST_BASE_DIR, "missing-config.yaml")

ROOT_FOLDER_ID = "root-folder"
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"

_QUERY_RE = re.compile(r"name='((?:[^'\\]|\\.)*)' and '((?:[^'\\]|\\.)*)' in parents")


def _unquote(value):
    return re.sub(r"\\(.)", r"\1", value)


class _FakeRequest:
    def __init__(self, fn):
        self._fn = fn

    def execute(self):
        return self._fn()


class FakeDriveFiles:
    """In-memory stand-in for the Drive v3 files() resource."""

    def __init__(self):
        self.items = {}
        self.queries = []
        self._next_id = 1

    def _new_id(self, prefix):
        file_id = f"{prefix}-{self._next_id}"
        self._next_id += 1
        return file_id

    def list(self, q, fields=None):
        self.queries.append(q)
        match = _QUERY_RE.search(q)
        name, parent = _unquote(match.group(1)), _unquote(match.group(2))

        def run():
            files = [
                {"id": item["id"], "name": item["name"]}
                for item in self.items.values()
                if item["name"] == name
                and parent in item["parents"]
                and item["mimeType"] == FOLDER_MIME_TYPE
            ]
            return {"files": files}

        return _FakeRequest(run)

    def create(self, body, fields=None, media_body=None):
        def run():
            is_folder = body.get("mimeType") == FOLDER_MIME_TYPE
            file_id = self._new_id("folder" if is_folder else "file")
            content = None
            if media_body is not None:
                content = media_body.getbytes(0, media_body.size())
            self.items[file_id] = {
                "id": file_id,
                "name": body["name"],
                "parents": list(body.get("parents", [])),
                "mimeType": body.get("mimeType") or media_body.mimetype(),
                "content": content,
            }
            result = {"id": file_id}
            if not is_folder:
                result["webViewLink"] = f"https://drive.google.com/file/d/{file_id}/view"
            return result

        return _FakeRequest(run)

    def get_media(self, fileId):
        return _FakeRequest(lambda: self.items[fileId]["content"])

    def folders(self):
        return [item for item in self.items.values() if item["mimeType"] == FOLDER_MIME_TYPE]

    def documents(self):
        return [item for item in self.items.values() if item["mimeType"] != FOLDER_MIME_TYPE]


class FakeDriveService:
    """Minimal googleapiclient Drive service double."""

    def __init__(self):
        self._files = FakeDriveFiles()

    def files(self):
        return self._files


class FakeLLM:
    """LLM provider double that returns a canned reply and records calls."""

    model_name = "groq/test-model"

    def __init__(self, reply):
        self.reply = reply
        self.calls = []

    async def complete(self, prompt, system_prompt=None, **kwargs):
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt, **kwargs})
        return self.reply


NUMERIC_RESULT = {
    "totalScore": 85,
    "maxScore": 100,
    "percentage": 85,
    "questions": [
        {
            "number": 1,
            "answerCorrect": True,
            "score": 9,
            "maxScore": 10,
            "feedback": "Đáp án đúng.",
        }
    ],
    "strengths": ["Tính toán chính xác"],
    "improvements": ["Cần viết rõ đơn vị"],
    "overall": "Làm bài tốt!",
}

PROFICIENCY_RESULT = {
    "totalScore": 17,
    "maxScore": 20,
    "percentage": 85,
    "cefrLevel": "B2",
    "targetLevel": "C1",
    "criteria": {"content": 4, "communicative": 5, "organisation": 4, "language": 4},
    "strengths": ["Clear structure"],
    "improvements": ["Fewer grammar errors"],
    "specificFeedback": ["Line 3: 'I am agree' → 'I agree'"],
    "overall": "Good B2 level.",
}


@pytest.fixture(autouse=True)
def setup_teardown():
    """Fresh tables for each test."""
    from homework_grader.core.database import init_db, drop_db

    init_db()
    yield
    drop_db()


@pytest.fixture
def db():
    """Create a test database session."""
    from homework_grader.core.database import get_session_local

    SessionLocal = get_session_local()
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def drive_service():
    return FakeDriveService()


@pytest.fixture
def storage(drive_service):
    from homework_grader.services.drive_storage import DriveStorage

    return DriveStorage(drive_service, ROOT_FOLDER_ID)


@pytest.fixture
def numeric_llm():
    return FakeLLM(json.dumps(NUMERIC_RESULT))


@pytest.fixture
def proficiency_llm():
    return FakeLLM(json.dumps(PROFICIENCY_RESULT))


@pytest.fixture
def make_client(storage, monkeypatch):
    """Build a TestClient with Drive and the LLM replaced by doubles."""
    from fastapi.testclient import TestClient

    from main import app
    from homework_grader.services import grading_service, submission_service

    def _make(llm=None):
        llm = llm or FakeLLM(json.dumps(NUMERIC_RESULT))
        monkeypatch.setattr(submission_service, "get_drive_storage", lambda: storage)
        monkeypatch.setattr(grading_service, "get_llm_provider", lambda: llm)
        return TestClient(app)

    return _make


@pytest.fixture
def unconfigured_client(tmp_path, monkeypatch):
    """TestClient with no Google or LLM credentials anywhere."""
    from fastapi.testclient import TestClient

    from main import app
    from homework_grader.core import config as config_module
    from homework_grader.services import drive_storage
    from homework_grader.services.ai_providers import llm_factory

    # Secrets also read .env from the working directory
    monkeypatch.chdir(tmp_path)
    for name in (
        "GROQ_API_KEY",
        "OPENAI_API_KEY",
        "GOOGLE_CLIENT_ID",
        "GOOGLE_CLIENT_SECRET",
        "GOOGLE_REDIRECT_URI",
        "GOOGLE_REFRESH_TOKEN",
        "GOOGLE_ROOT_FOLDER_ID",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    monkeypatch.setattr(config_module, "_secrets", None)
    monkeypatch.setattr(drive_storage, "_credentials", None)
    monkeypatch.setattr(llm_factory, "_provider", None)

    return TestClient(app)
