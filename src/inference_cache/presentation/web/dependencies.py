"""
FastAPI 의존성

lifespan에서 생성되어 app.state에 보관된 서비스 묶음을 꺼냅니다.
"""

from fastapi import Request

from ...application import InferenceServices


def get_services(request: Request) -> InferenceServices:
    """요청이 속한 앱의 InferenceServices 반환"""
    return request.app.state.services
