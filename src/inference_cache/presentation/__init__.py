"""
Presentation Layer

- web: FastAPI 앱 (캐시 관리 API, AI 질의 API)
- cli: 운영용 CLI (click)
"""
