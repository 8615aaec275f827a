"""
Infrastructure Layer

외부 의존성 구현

Structure:
- cache: 응답 캐시 (LRU + TTL + 바이트 예산), JSON codec
- config: 환경변수 기반 설정
- huggingface: Upstream 텍스트 생성 Provider
- logging: structlog 기반 구조화 로깅
"""
