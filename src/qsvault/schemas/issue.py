from pydantic import BaseModel, ConfigDict, Field


class Issue(BaseModel):
    """A tracker ticket delivering one payload.

    `title` selects the pipeline; `body` is the JSON payload text.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str
    body: str
    created_at: str | None = Field(default=None, alias="createdAt")
    number: int | None = None
    author: str | None = None

    def authored_by(self, expected: str) -> bool:
        """Compare the (trimmed) author login against the one allowed to file tickets."""
        return (self.author or "").strip() == expected
