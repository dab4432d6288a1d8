from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Literal


ParseQuality = Literal["high", "medium", "low"]
SectionKey = Literal["contact", "summary", "experience", "education", "skills", "projects"]


class SectionMap(BaseModel):
    """Trimmed, non-empty lines per resume section, in document order."""
    model_config = ConfigDict(frozen=True)

    contact: List[str] = Field(default_factory=list)
    summary: List[str] = Field(default_factory=list)
    experience: List[str] = Field(default_factory=list)
    education: List[str] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    projects: List[str] = Field(default_factory=list)


class ProjectRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    description: str = Field(default="", max_length=503, description="Trimmed, capped at 500 chars plus '...'")
    technologies: List[str] = Field(default_factory=list, description="Unique, first-seen order")


class ParsedResume(BaseModel):
    model_config = ConfigDict(frozen=True)

    sections: SectionMap = Field(default_factory=SectionMap)
    projects: List[ProjectRecord] = Field(default_factory=list)
    technologies: List[str] = Field(default_factory=list, description="Unique, vocabulary order")


class FieldConfidence(BaseModel):
    """Per-field confidence metadata. Tracks why confidence is what it is."""
    field_name: str
    confidence: float = Field(..., ge=0.0, le=1.0, description="0.0 (no confidence) to 1.0 (absolute certainty)")
    extraction_method: str = Field(..., description="How it was extracted (e.g., 'keyword_headers', 'experience_fallback')")
    reasons: List[str] = Field(default_factory=list, description="Why confidence is this value")


class ParseTextRequest(BaseModel):
    text: str = Field(..., description="Raw resume text, newline-delimited")


class ParseResponse(BaseModel):
    parsed_resume: ParsedResume
    confidence_scores: Dict[str, FieldConfidence] = Field(
        default_factory=dict,
        description="Confidence metadata for each field"
    )
    parse_quality: ParseQuality
    summary_message: str = Field(default="", description="Message summarizing identified projects and skills")
    warnings: List[str] = Field(default_factory=list)
