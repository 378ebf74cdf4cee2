"""Request models for the generate-api."""

from pydantic import BaseModel, StrictFloat, StrictInt, StrictStr


class GenerateRequest(BaseModel):
    """
    Raw body of ``POST /generate``.

    Every field is optional here so that missing values reach the domain
    validator and are reported together with the other field errors.
    """

    topic: StrictStr | None = None
    style: StrictStr | None = None
    duration: StrictInt | StrictFloat | StrictStr | None = None
    timestamp: StrictStr | None = None
