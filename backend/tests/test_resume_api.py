import io
import os

import pytest
from docx import Document

from resumeforge.core.config import settings
from resumeforge.resumes.ocr import NullOCREngine, OCREngine, get_ocr_engine


def _docx_bytes(lines):
    document = Document()
    for line in lines:
        document.add_paragraph(line)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()


DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

RESUME_LINES = [
    "John Doe",
    "john@x.com",
    "555-123-4567",
    "",
    "Experience",
    "Acme Corporation",
    "Backend Developer",
    "Maintained the billing service",
    "",
    "Education",
    "State University",
    "BSc Computer Science",
    "",
    "Skills",
    "React, Node.js, SQL",
]


class FakeOCREngine(OCREngine):
    def __init__(self, text):
        self.text = text
        self.calls = 0

    def reextract(self, data, file_type):
        self.calls += 1
        return self.text


def test_parse_docx_upload(client):
    response = client.post(
        "/api/resume/parse",
        files={"resume": ("resume.docx", _docx_bytes(RESUME_LINES), DOCX_MIME)},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["personalInfo"] == {
        "fullName": "John Doe",
        "email": "john@x.com",
        "phone": "555-123-4567",
    }
    assert body["experience"] == [
        {
            "company": "Acme Corporation",
            "position": "Backend Developer",
            "startDate": "",
            "endDate": "",
            "description": "Maintained the billing service",
        }
    ]
    assert body["education"] == [
        {"school": "State University", "degree": "BSc Computer Science", "startDate": "", "endDate": ""}
    ]
    for skill in ("React", "Node.js", "SQL"):
        assert skill in body["skills"]
    assert body["summary"] == ""


def test_parse_without_file(client):
    response = client.post("/api/resume/parse", files={"other": ("notes.txt", b"hello", "text/plain")})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "No file uploaded"


def test_parse_rejects_unsupported_extension(client):
    response = client.post("/api/resume/parse", files={"resume": ("resume.txt", b"John Doe", "text/plain")})

    assert response.status_code == 400
    assert response.json()["error"]["type"] == "BadRequestError"


def test_parse_rejects_oversized_upload(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE_MB", 0)

    response = client.post(
        "/api/resume/parse",
        files={"resume": ("resume.docx", _docx_bytes(RESUME_LINES), DOCX_MIME)},
    )

    assert response.status_code == 422


def test_unreadable_pdf_is_a_server_error(client):
    response = client.post(
        "/api/resume/parse",
        files={"resume": ("resume.pdf", b"this is not a pdf", "application/pdf")},
    )

    assert response.status_code == 500
    body = response.json()
    assert body["error"]["message"] == "Failed to parse document"
    assert body["error"]["type"] == "TextExtractionError"


def test_near_empty_document_still_parses(client):
    response = client.post(
        "/api/resume/parse",
        files={"resume": ("scan.docx", _docx_bytes(["Jo"]), DOCX_MIME)},
    )

    assert response.status_code == 200
    assert response.json() == {
        "personalInfo": {"fullName": "Jo"},
        "summary": "",
        "experience": [],
        "education": [],
        "skills": [],
    }


def test_ocr_engine_text_replaces_near_empty_extraction(client):
    from resumeforge.main import app

    engine = FakeOCREngine("Jane Roe\njane@roe.dev\nSkills\nPython, Go")
    app.dependency_overrides[get_ocr_engine] = lambda: engine
    try:
        response = client.post(
            "/api/resume/parse",
            files={"resume": ("scan.docx", _docx_bytes([""]), DOCX_MIME)},
        )
    finally:
        app.dependency_overrides.pop(get_ocr_engine, None)

    assert response.status_code == 200
    assert engine.calls == 1
    body = response.json()
    assert body["personalInfo"] == {"fullName": "Jane Roe", "email": "jane@roe.dev"}
    assert body["skills"] == ["Python", "Go"]


def test_ocr_engine_not_consulted_for_text_documents(client):
    from resumeforge.main import app

    engine = FakeOCREngine("ignored")
    app.dependency_overrides[get_ocr_engine] = lambda: engine
    try:
        response = client.post(
            "/api/resume/parse",
            files={"resume": ("resume.docx", _docx_bytes(RESUME_LINES), DOCX_MIME)},
        )
    finally:
        app.dependency_overrides.pop(get_ocr_engine, None)

    assert response.status_code == 200
    assert engine.calls == 0


def test_upload_photo_is_stored_and_served(client):
    content = b"\x89PNG\r\n\x1a\nfake-image"
    response = client.post("/api/resume/upload-photo", files={"profilePicture": ("me.png", content, "image/png")})

    assert response.status_code == 200
    image_url = response.json()["imageUrl"]
    assert image_url.startswith("http://testserver/uploads/")
    assert image_url.endswith(".png")

    file_name = image_url.rsplit("/", 1)[1]
    assert os.path.exists(os.path.join(settings.UPLOAD_DIR, file_name))

    served = client.get(f"/uploads/{file_name}")
    assert served.status_code == 200
    assert served.content == content


def test_upload_photo_requires_an_image(client):
    missing = client.post("/api/resume/upload-photo", files={"other": ("a.txt", b"x", "text/plain")})
    assert missing.status_code == 400
    assert missing.json()["error"]["message"] == "No image uploaded"

    wrong_type = client.post(
        "/api/resume/upload-photo",
        files={"profilePicture": ("me.exe", b"MZ", "application/octet-stream")},
    )
    assert wrong_type.status_code == 400


def test_ocr_engine_requires_reextract():
    class Incomplete(OCREngine):
        pass

    with pytest.raises(TypeError):
        Incomplete()
    assert NullOCREngine().reextract(b"%PDF", "pdf") is None
