from fastapi import APIRouter, UploadFile, File, HTTPException

from app.core.config import MAX_UPLOAD_BYTES
from app.core.schemas import ParseResponse, ParseTextRequest
from app.core.text_parser import parse_text_to_response

router = APIRouter(tags=["parse"])

TEXT_CONTENT_TYPES = {"text/plain", "text/markdown", "application/json"}


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Parse Resume",
    description="Extract sections, projects and technologies from a plain-text resume file.",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {
                "application/json": {
                    "example": {
                        "parsed_resume": {
                            "sections": {
                                "contact": [], "summary": [], "experience": [],
                                "education": [], "skills": [],
                                "projects": ["E-commerce Platform:", "Built with react and a postgresql database."]
                            },
                            "projects": [
                                {
                                    "title": "E-commerce Platform",
                                    "description": "Built with react and a postgresql database.",
                                    "technologies": ["react", "sql", "postgresql"]
                                }
                            ],
                            "technologies": ["react", "sql", "postgresql"]
                        },
                        "confidence_scores": {},
                        "parse_quality": "medium",
                        "summary_message": "Here's my resume for your reference: ...",
                        "warnings": []
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File too large"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File has no extractable text"}
    }
)
async def parse_resume(
    file: UploadFile = File(..., description="Resume file (TXT or MD); binary formats must be converted to text first")
):
    """
    Parse a resume file and extract projects and technologies.

    **Supported formats:**
    - TXT (.txt)
    - Markdown (.md)

    **Returns:**
    - **parsed_resume**: Sections, projects and technologies
    - **confidence_scores**: Per-field confidence metadata
    - **parse_quality**: Overall quality assessment (high/medium/low)
    - **summary_message**: Projects and skills summary for the interviewer
    - **warnings**: Any warnings during parsing
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File exceeds {MAX_UPLOAD_BYTES} bytes.")

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()

    if content_type in TEXT_CONTENT_TYPES or filename.endswith((".txt", ".md")):
        text = raw.decode("utf-8", errors="replace")
        if not text.strip():
            raise HTTPException(status_code=422, detail="Could not extract text from the uploaded file.")
        return parse_text_to_response(text)

    raise HTTPException(status_code=415, detail=f"Unsupported content type for now: {file.content_type}")


@router.post(
    "/parse/text",
    response_model=ParseResponse,
    summary="Parse Resume Text",
    description="Extract sections, projects and technologies from resume text already decoded by the caller.",
    responses={422: {"description": "Text is empty"}},
)
def parse_resume_text(request: ParseTextRequest):
    if not request.text.strip():
        raise HTTPException(status_code=422, detail="Could not extract text: resume text is empty.")
    return parse_text_to_response(request.text)
