"""FastAPI 앱 - AI 응답 캐시 관리 및 질의 API"""
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ... import __version__
from ...application import InferenceServices, build_services
from ...infrastructure.config import AppSettings, load_settings, parse_str_env
from ...infrastructure.logging import configure_structlog, get_logger
from .routers import ai_cache_router, ai_router, health_router

logger = get_logger(__name__)


def create_app(
    settings: Optional[AppSettings] = None,
    services: Optional[InferenceServices] = None,
) -> FastAPI:
    """
    FastAPI 앱 생성

    services를 주입하면 그대로 사용하고(테스트용), 아니면 lifespan 시작 시
    설정을 읽어 서비스를 생성하고 종료 시 정리합니다.

    Args:
        settings: 애플리케이션 설정 (None이면 환경변수에서 로드)
        services: 미리 생성된 서비스 묶음

    Returns:
        FastAPI 앱
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = services is None
        if owned:
            load_dotenv()
            app.state.services = build_services(settings or load_settings())

        active: InferenceServices = app.state.services
        logger.info(
            "inference-cache started",
            cache_enabled=active.gateway.enabled,
            max_items=active.cache.max_items,
            max_size_bytes=active.cache.max_size_bytes,
        )

        yield

        logger.info("inference-cache shutting down")
        if owned:
            await active.aclose()

    app = FastAPI(title="inference-cache", version=__version__, lifespan=lifespan)
    if services is not None:
        app.state.services = services

    origins = parse_str_env("WEB_ALLOWED_ORIGINS", "*").split(",")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(ai_cache_router)
    app.include_router(ai_router)

    return app


def main(settings: Optional[AppSettings] = None) -> None:
    """웹 서버 실행"""
    import uvicorn

    load_dotenv()
    settings = settings or load_settings()
    configure_structlog(
        log_dir=settings.log_dir,
        log_level=settings.log_level,
        enable_json=settings.log_json,
    )

    logger.info("Starting web server", host=settings.web_host, port=settings.web_port)
    uvicorn.run(
        create_app(settings),
        host=settings.web_host,
        port=settings.web_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
