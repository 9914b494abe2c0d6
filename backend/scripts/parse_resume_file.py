"""
Parse a resume file from the command line and print the structured record
"""
import sys
import json
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from resumeforge.core.logging_config import configure_logging
from resumeforge.resumes.parser import ResumeParser
import structlog

logger = structlog.get_logger()


def parse_file(file_path: str) -> dict:
    """Extract text from a PDF, DOCX or plain-text file and structure it"""
    parser = ResumeParser()
    path = Path(file_path)

    if path.suffix.lower() == ".txt":
        text = path.read_text(encoding="utf-8")
    else:
        text = parser.extract_text(file_path)

    if parser.is_probably_scanned(text):
        print(f"⚠️  Very little text extracted ({len(text.strip())} chars); the file may be a scan.")

    return parser.parse(text).to_response()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/parse_resume_file.py <resume.pdf|resume.docx|resume.txt>")
        sys.exit(1)

    configure_logging()
    try:
        record = parse_file(sys.argv[1])
    except Exception as e:
        logger.error("parse_failed", file_path=sys.argv[1], error=str(e))
        print(f"❌ Error: {e}")
        sys.exit(1)

    print(json.dumps(record, indent=2, ensure_ascii=False))
