import uuid
from threading import Lock
from typing import Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, StrictFloat, StrictInt

from config import build_rng, get_settings
from event_log import configure_logging, log_event
from random_number_generator import InvalidArgument, random_integer

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI()

# Sync endpoints run in a thread pool; a seeded Random is shared across them.
_rng = build_rng(settings)
_rng_lock = Lock()


class RandomIntegerRequest(BaseModel):
    # Strict, so JSON booleans and strings fail here; floats still reach
    # random_integer so it reports non-integers itself
    start: Union[StrictInt, StrictFloat]
    end: Union[StrictInt, StrictFloat]
    step: Union[StrictInt, StrictFloat]


class RandomIntegerResponse(BaseModel):
    value: int
    start: int
    end: int
    step: int


@app.post("/random-integer", response_model=RandomIntegerResponse)
def draw_random_integer(payload: RandomIntegerRequest):
    """
    Draws one value from the stepped range described by the JSON body.
    Expected JSON: {"start": 0, "end": 10, "step": 5}
    """
    request_id = str(uuid.uuid4())
    log_event("request", request_id=request_id, **payload.model_dump())

    try:
        with _rng_lock:
            value = random_integer(payload.start, payload.end, payload.step, rng=_rng)
    except InvalidArgument as e:
        log_event("invalid_argument", request_id=request_id, error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

    log_event("success", request_id=request_id, value=value)
    return RandomIntegerResponse(
        value=value,
        start=int(payload.start),
        end=int(payload.end),
        step=int(payload.step),
    )


@app.get("/health")
def health():
    return {"status": "ok"}
