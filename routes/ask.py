"""Ask endpoint: recorded question in, persona video out."""

from typing import Annotated

import pydantic
from abe_common.logging import setup_logging
from fastapi import APIRouter, Depends, Header, Request
from fastapi.concurrency import run_in_threadpool

from dependencies import get_question_handler
from domain import InboundRequest
from error_handlers import error_response
from exceptions import AuthenticationError, ValidationError
from handlers import QuestionHandler
from response_models import AskRequest, AskResponse, ErrorResponse

logger = setup_logging()

router = APIRouter(prefix="/api", tags=["ask"])

HandlerDep = Annotated[QuestionHandler, Depends(get_question_handler)]


async def _read_body(request: Request) -> AskRequest:
    """Parses the JSON body; an empty body means no audio was sent."""
    raw = await request.body()
    if not raw.strip():
        return AskRequest()
    try:
        return AskRequest.model_validate_json(raw)
    except pydantic.ValidationError as e:
        raise ValidationError("Audio data is required") from e


@router.post(
    "/ask",
    response_model=AskResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": AskRequest.model_json_schema()}},
        }
    },
)
async def ask(
    request: Request,
    handler: HandlerDep,
    x_access_password: Annotated[str | None, Header()] = None,
):
    """
    Answers a recorded question with a persona video.

    The password is checked before the body is read, so an unauthenticated
    caller always gets 401. The pipeline itself runs in the threadpool and
    blocks until the video is ready, which can take minutes.
    """
    try:
        handler.authenticate(x_access_password)
        body = await _read_body(request)
        inbound = InboundRequest(audio=body.audio or "", access_password=x_access_password)
        result = await run_in_threadpool(handler.process, inbound)
    except AuthenticationError as e:
        return error_response(401, str(e))
    except ValidationError as e:
        return error_response(400, str(e))
    except Exception as e:
        logger.exception("Error processing request")
        return error_response(500, "Internal server error", details=str(e))

    return AskResponse(
        transcription=result.transcription,
        response=result.response,
        video_url=result.video_url,
    )
