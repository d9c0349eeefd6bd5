# roster/api/routes/people.py
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException

from roster.api.models.person import PersonRead, ValidationErrors
from roster.db.connect import get_session_dep
from roster.db.crud import PersonCRUD
from roster.db.validation import RecordInvalid
from roster.logging import get_logger

logger = get_logger(__file__)

router = APIRouter()
person_crud = PersonCRUD()

PERSON_FIELDS = ("username", "email", "phone")
FORM_CONTENT_TYPES = {"application/x-www-form-urlencoded", "multipart/form-data"}


def _as_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return str(value)


async def _body_params(request: Request) -> dict[str, Any]:
    """Fields from a JSON object or form body. Anything unparseable yields nothing."""

    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()

    if media_type in FORM_CONTENT_TYPES:
        try:
            form = await request.form()
        except HTTPException as exc:
            # starlette turns form parser errors into a 400 while inside an app
            logger.warning("Ignoring unreadable form body: %s", exc.detail)
            return {}
        return {key: value for key, value in form.items() if isinstance(value, str)}

    if media_type and not media_type.endswith("json"):
        return {}

    if not (await request.body()).strip():
        return {}
    try:
        payload = await request.json()
    except (ValueError, RecursionError):
        logger.warning("Ignoring malformed JSON body")
        return {}
    if not isinstance(payload, dict):
        return {}
    return payload


async def person_params(request: Request) -> dict[str, str | None]:
    """Collect ``username``, ``email`` and ``phone`` from the query string and body.

    Body values override query values. Missing fields come back as ``None``.
    """

    params: dict[str, Any] = dict(request.query_params)
    params.update(await _body_params(request))
    return {name: _as_text(params.get(name)) for name in PERSON_FIELDS}


@router.post(
    "",
    response_model=PersonRead,
    status_code=201,
    summary="Create a person",
    responses={422: {"model": ValidationErrors, "description": "Validation failed"}},
)
@router.post("/", response_model=PersonRead, status_code=201, include_in_schema=False)
def create_person(
    params: dict[str, str | None] = Depends(person_params),
    db: Session = Depends(get_session_dep),
):
    try:
        person = person_crud.create(db, params)
    except RecordInvalid as exc:
        return JSONResponse(status_code=422, content={"errors": exc.errors})
    return PersonRead.model_validate(person).model_dump()
