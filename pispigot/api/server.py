"""
FastAPI surface for the π digit engine.

Every request builds its own :class:`~pispigot.spigot.PiDigits`; engines are
never shared between requests.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from fastapi import FastAPI, HTTPException, Path as PathParam, Query
from fastapi.responses import StreamingResponse

from .. import EngineConfig
from ..formatting import take
from ..profiles import ProfileError, StreamProfile, UnknownProfile, load_profiles, resolve_profile
from ..spigot import PiDigits
from . import schemas

LOG = logging.getLogger(__name__)

STREAM_CHUNK_SIZE = 64


def _profile_model(profile: StreamProfile) -> schemas.ProfileModel:
    return schemas.ProfileModel(**profile.model_dump())


def _stream_chunks(engine: PiDigits, offset: int, count: int) -> Iterator[str]:
    take(engine, offset)
    remaining = count
    while remaining > 0:
        size = min(STREAM_CHUNK_SIZE, remaining)
        yield take(engine, size)
        remaining -= size


def create_app(
    *,
    config: Optional[EngineConfig] = None,
) -> FastAPI:
    engine_config = config or EngineConfig()
    profile = resolve_profile(engine_config.profile, engine_config.profiles_path)

    app = FastAPI(title="pispigot API")

    def _check_bounds(offset: int, count: int) -> None:
        if offset + count > profile.max_count:
            raise HTTPException(
                status_code=400,
                detail=f"offset + count must not exceed {profile.max_count}",
            )

    @app.get("/healthz", response_model=schemas.HealthModel)
    async def healthz() -> schemas.HealthModel:
        return schemas.HealthModel(profile=engine_config.profile)

    @app.get("/profiles", response_model=schemas.ProfileCollection)
    async def list_profiles() -> schemas.ProfileCollection:
        try:
            profiles = load_profiles(engine_config.profiles_path)
        except ProfileError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return schemas.ProfileCollection(
            profiles={name: _profile_model(item) for name, item in profiles.items()}
        )

    @app.get("/profiles/{name}", response_model=schemas.ProfileModel)
    async def get_profile(name: str = PathParam(...)) -> schemas.ProfileModel:
        try:
            found = resolve_profile(name, engine_config.profiles_path)
        except UnknownProfile as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except ProfileError as exc:
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        return _profile_model(found)

    @app.get("/digits", response_model=schemas.DigitsResponse)
    def get_digits(
        count: Optional[int] = Query(default=None, ge=0),
        offset: int = Query(default=0, ge=0),
    ) -> schemas.DigitsResponse:
        requested = profile.count if count is None else count
        _check_bounds(offset, requested)
        engine = PiDigits()
        take(engine, offset)
        digits = take(engine, requested)
        LOG.debug("Served %d characters at offset %d", requested, offset)
        return schemas.DigitsResponse(offset=offset, count=requested, digits=digits)

    @app.get("/digits/stream", response_class=StreamingResponse)
    def stream_digits(
        count: Optional[int] = Query(default=None, ge=0),
        offset: int = Query(default=0, ge=0),
    ) -> StreamingResponse:
        requested = profile.count if count is None else count
        _check_bounds(offset, requested)
        return StreamingResponse(
            _stream_chunks(PiDigits(), offset, requested),
            media_type="text/plain",
        )

    return app
