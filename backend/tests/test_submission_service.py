"""
Tests for submission upload and listing.
"""

import base64

import pytest

from homework_grader.core.errors import DataError, NotFoundError
from homework_grader.models import Submission, SubmissionStatus
from homework_grader.services.submission_service import SubmissionService, decode_document

PDF_BYTES = b"%PDF-1.4 test document \x00\xff"
PDF_BASE64 = base64.b64encode(PDF_BYTES).decode()


def _add(db, file_id, session_date, uploaded_at):
    submission = Submission(
        file_id=file_id,
        file_name=f"{file_id}.pdf",
        subject="Toán lớp 8",
        session_date=session_date,
        drive_url=f"https://drive.google.com/file/d/{file_id}/view",
        uploaded_at=uploaded_at,
    )
    db.add(submission)
    db.commit()
    return submission


class TestDecodeDocument:

    def test_decodes_valid_base64(self):
        assert decode_document(PDF_BASE64) == PDF_BYTES

    @pytest.mark.parametrize("payload", ["not base64!!", "abc", "@@@@"])
    def test_malformed_base64_raises(self, payload):
        with pytest.raises(DataError):
            decode_document(payload)


class TestUpload:

    def test_upload_records_submission(self, db, storage, drive_service):
        submission = SubmissionService(db, storage).upload(
            file_name="bai-tap.pdf",
            file_base64=PDF_BASE64,
            subject="Toán lớp 8",
            session_date="2025-01-15T08:30:00.000Z",
        )

        rows = db.query(Submission).all()
        assert len(rows) == 1
        stored = rows[0]
        assert stored.id == submission.id
        assert stored.status == SubmissionStatus.UPLOADED
        assert stored.grading_result is None
        assert stored.graded_at is None
        assert stored.uploaded_at
        assert stored.session_date == "2025-01-15T08:30:00.000Z"

        doc = drive_service.files().documents()[0]
        assert stored.file_id == doc["id"]
        assert doc["content"] == PDF_BYTES
        folder = drive_service.files().folders()[0]
        assert folder["name"] == "2025-01-15"
        assert doc["parents"] == [folder["id"]]

    def test_same_date_reuses_folder(self, db, storage, drive_service):
        service = SubmissionService(db, storage)
        service.upload("a.pdf", PDF_BASE64, "Toán lớp 8", "2025-01-15T08:00:00Z")
        service.upload("b.pdf", PDF_BASE64, "FCE Writing", "2025-01-15T17:45:00Z")

        assert len(drive_service.files().folders()) == 1
        assert len(drive_service.files().documents()) == 2

    def test_malformed_base64_creates_nothing(self, db, storage, drive_service):
        with pytest.raises(DataError):
            SubmissionService(db, storage).upload("a.pdf", "%%%not-base64%%%", "Toán", "2025-01-15")

        assert db.query(Submission).count() == 0
        assert drive_service.files().items == {}


class TestGet:

    def test_missing_submission_raises(self, db):
        with pytest.raises(NotFoundError):
            SubmissionService(db).get("does-not-exist")


class TestList:

    def test_lists_all_newest_first(self, db):
        _add(db, "old", "2025-01-10", "2025-01-10T10:00:00+00:00")
        _add(db, "new", "2025-02-01", "2025-02-01T10:00:00+00:00")
        _add(db, "mid", "2025-01-20", "2025-01-20T10:00:00+00:00")

        result = SubmissionService(db).list()

        assert [s.file_id for s in result] == ["new", "mid", "old"]

    def test_filters_inclusive_date_range(self, db):
        _add(db, "before", "2024-12-31", "2025-01-01T09:00:00+00:00")
        _add(db, "first", "2025-01-01", "2025-01-02T09:00:00+00:00")
        _add(db, "inside", "2025-01-15", "2025-01-16T09:00:00+00:00")
        _add(db, "last", "2025-01-31", "2025-01-31T09:00:00+00:00")
        _add(db, "after", "2025-02-01", "2025-02-01T09:00:00+00:00")

        result = SubmissionService(db).list("2025-01-01", "2025-01-31")

        assert [s.file_id for s in result] == ["last", "inside", "first"]

    def test_single_bound_is_ignored(self, db):
        _add(db, "a", "2024-12-31", "2025-01-01T09:00:00+00:00")
        _add(db, "b", "2025-03-01", "2025-03-01T09:00:00+00:00")

        assert len(SubmissionService(db).list(start_date="2025-01-01")) == 2
        assert len(SubmissionService(db).list(end_date="2025-01-31")) == 2
