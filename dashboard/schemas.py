"""Dashboard data model and backend request/response schemas."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


def split_csv(text: str | None) -> list[str]:
    """Split comma-separated free text into trimmed, non-empty entries."""
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


# Profile schemas
class Profile(BaseModel):
    """Candidate identity and search/matching preferences."""

    name: str
    email: str
    phone: str | None = None
    resume_text: str | None = None
    titles: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    remote: bool = True
    include_keywords: list[str] = Field(default_factory=list)
    exclude_keywords: list[str] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """JSON body for the profile upsert; absent optionals are omitted."""
        payload = self.model_dump()
        for key in ("phone", "resume_text"):
            if payload[key] is None:
                del payload[key]
        return payload


class ProfileForm(BaseModel):
    """Raw profile form fields as typed by the user."""

    name: str = ""
    email: str = ""
    phone: str = ""
    resume_text: str = ""
    titles: str = Field(default="", description="Preferred titles, comma-separated")
    locations: str = Field(default="", description="Locations, comma-separated")
    remote: Any = True

    def to_profile(self) -> Profile:
        return Profile(
            name=self.name,
            email=self.email,
            phone=self.phone or None,
            resume_text=self.resume_text or None,
            titles=split_csv(self.titles),
            locations=split_csv(self.locations),
            remote=bool(self.remote),
            include_keywords=[],
            exclude_keywords=[],
        )


# Search schemas
class JobListing(BaseModel):
    """A single search result, not yet an application."""

    title: str
    url: str
    snippet: str | None = None
    company: str | None = None


# Application schemas
class ApplicationCreate(BaseModel):
    job_title: str
    company: str | None
    job_url: str
    applicant_email: str

    @classmethod
    def from_listing(cls, listing: JobListing, applicant_email: str) -> "ApplicationCreate":
        return cls(
            job_title=listing.title,
            company=listing.company,
            job_url=listing.url,
            applicant_email=applicant_email,
        )


class Application(BaseModel):
    """A tracked application. `status` and `cover_letter` are backend-owned."""

    job_title: str
    company: str | None = None
    job_url: str
    applicant_email: str
    status: str
    cover_letter: str = ""

    class Config:
        frozen = True

    @field_validator("cover_letter", mode="before")
    @classmethod
    def _empty_cover_letter(cls, value: Any) -> Any:
        # Not generated yet
        return "" if value is None else value
