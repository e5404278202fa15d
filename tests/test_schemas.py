"""Tests for bridge schemas."""

import msgspec
import pytest

from uploadthing_bridge.api.services.uploadthing import (
    DeleteResult,
    FileCategory,
    OperationFailure,
    UploadRequest,
    UploadSuccess,
)


class TestFileCategory:
    """Tests for MIME type lookup."""

    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("photo.jpg", "image/jpeg"),
            ("photo.JPEG", "image/jpeg"),
            ("diagram.png", "image/png"),
            ("anim.gif", "image/gif"),
            ("shot.webp", "image/webp"),
            ("scan.heic", "image/jpeg"),
            ("noextension", "image/jpeg"),
        ],
    )
    def test_image_types(self, filename: str, expected: str) -> None:
        """Test image MIME types come from the extension."""
        assert FileCategory.mime_type_for("image", filename) == expected

    def test_pdf_type(self) -> None:
        """Test PDF category ignores the extension."""
        assert FileCategory.mime_type_for("pdf", "quote.bin") == "application/pdf"

    def test_unknown_category(self) -> None:
        """Test other categories are sent as octet-stream."""
        assert FileCategory.mime_type_for("document", "notes.txt") == "application/octet-stream"


class TestUploadRequest:
    """Tests for request field validation."""

    def test_complete_request(self) -> None:
        """Test a complete request has no missing fields."""
        request = UploadRequest(
            file_path="/tmp/a.png",
            field="photo",
            file_type="image",
            original_filename="a.png",
        )
        assert request.missing_fields() == []

    def test_missing_fields_listed_in_order(self) -> None:
        """Test blank and absent fields are reported."""
        request = UploadRequest(file_path="", field="photo")
        assert request.missing_fields() == ["filePath", "fileType", "originalFilename"]


class TestResultEncoding:
    """Tests for the JSON contracts printed to the caller."""

    def test_upload_success_shape(self) -> None:
        """Test upload success uses camelCase keys."""
        result = UploadSuccess(
            url="https://utfs.io/f/abc",
            file_key="abc",
            field="photo",
            file_name="a.png",
            file_size=10,
            file_type="image",
        )

        assert msgspec.json.decode(msgspec.json.encode(result)) == {
            "success": True,
            "message": "File uploaded successfully",
            "url": "https://utfs.io/f/abc",
            "fileKey": "abc",
            "field": "photo",
            "fileName": "a.png",
            "fileSize": 10,
            "fileType": "image",
        }

    def test_failure_omits_missing_code(self) -> None:
        """Test the code key is only present when known."""
        assert msgspec.json.decode(msgspec.json.encode(OperationFailure.from_message("boom"))) == {
            "success": False,
            "error": "boom",
        }
        assert msgspec.json.decode(
            msgspec.json.encode(OperationFailure.from_message("boom", code="TOO_LARGE"))
        ) == {"success": False, "error": "boom", "code": "TOO_LARGE"}

    def test_delete_result_keeps_nulls(self) -> None:
        """Test empty key lists are encoded as null."""
        result = DeleteResult(success=False, message="Failed to delete 0 file(s)")

        assert msgspec.json.decode(msgspec.json.encode(result)) == {
            "success": False,
            "message": "Failed to delete 0 file(s)",
            "deletedFiles": None,
            "failedFiles": None,
        }
