"""
비즈니스 질의 처리

사용자 질의로 비즈니스/부기(bookkeeping) 프롬프트를 만들고, 캐시 게이트웨이를
거쳐 모델을 호출한 뒤 응답에서 JSON 부분만 추출합니다.
"""

import json
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..domain.models import GenerationOptions
from ..infrastructure.logging import get_logger
from .gateway import CachedInferenceGateway
from .text_generation import ResilientTextGenerator

logger = get_logger(__name__, component="BusinessQueryService")

BOOKKEEPING_KEYWORDS = (
    "transaction",
    "categoriz",
    "anomal",
    "expense",
    "tax",
    "cash flow",
    "bookkeep",
    "account",
    "reconcil",
    "audit",
    "financial",
)

_BOOKKEEPING_PROMPT = """You are an AI bookkeeping assistant for Pigment, a business planning and financial management platform.
You have access to company transaction data, accounts, categories, and financial reports.
Analyze the following query related to bookkeeping or financial management and provide a detailed, accurate response.

Format your response as a JSON object with the following structure:
{{
  "type": "anomaly" | "categorization" | "tax" | "cashflow" | "financial_health" | "general",
  "message": "A short summary message",
  "data": {{
    // Response-specific structured data that includes:
    // For anomalies: detected unusual transactions with reasoning
    // For categorization: transaction categories with amounts and percentages
    // For tax analysis: deduction categories, eligibility, and insights
    // For cash flow: current position data, trends, and recommendations
    // For financial health: key ratios, performance metrics, and insights
    // For general: insights array with financial observations
  }}
}}

Today's date is {today}.

User query: {query}

JSON response:"""

_BUSINESS_PROMPT = """You are an AI business intelligence assistant for Pigment, a business planning platform.
Analyze the following query and provide a detailed, data-driven response with business insights.
If the query relates to financial forecasting, revenue, or regional performance, include specific numbers and trends.
Format your response as a JSON object with the following structure:
{{
  "type": "forecast" | "region" | "general",
  "message": "A short summary message",
  "data": {{
    // For forecasts include 'trend' array with month/value pairs and 'insight' string
    // For regions include 'regions' array with region performance data
    // For general include 'insights' array with bullet points
  }}
}}

Today's date is {today}.

User query: {query}

JSON response:"""

# 분석형 응답을 위해 낮은 temperature 사용
QUERY_MAX_TOKENS = 800
QUERY_TEMPERATURE = 0.3

_FALLBACK_EXCERPT_LENGTH = 200


def is_bookkeeping_query(query: str) -> bool:
    lowered = query.lower()
    return any(keyword in lowered for keyword in BOOKKEEPING_KEYWORDS)


def create_business_prompt(query: str, today: Optional[date] = None) -> str:
    """
    사용자 질의로 프롬프트 생성

    부기 관련 키워드가 포함되면 부기 어시스턴트 프롬프트를,
    그렇지 않으면 일반 비즈니스 인텔리전스 프롬프트를 사용합니다.

    Args:
        query: 사용자 질의
        today: 프롬프트에 넣을 날짜 (기본: 오늘)

    Returns:
        모델 입력 프롬프트
    """
    today_label = (today or date.today()).strftime("%B %d, %Y")
    template = _BOOKKEEPING_PROMPT if is_bookkeeping_query(query) else _BUSINESS_PROMPT
    return template.format(today=today_label, query=query)


def extract_json_response(raw_response: str) -> str:
    """
    모델 출력에서 JSON 객체 부분만 추출

    첫 '{'부터 마지막 '}'까지를 잘라내 검증합니다. 유효한 JSON이 아니면
    출력 앞부분을 insight로 담은 "general" 응답으로 감쌉니다.

    Args:
        raw_response: 모델 원본 출력

    Returns:
        JSON 문자열
    """
    candidate = raw_response.strip()
    start = candidate.find("{")
    end = candidate.rfind("}") + 1
    if start >= 0 and end > start:
        candidate = candidate[start:end]

    try:
        json.loads(candidate)
        return candidate
    except ValueError:
        logger.warning("AI response is not valid JSON, wrapping as general insight")

    excerpt = raw_response[:_FALLBACK_EXCERPT_LENGTH]
    if len(raw_response) > _FALLBACK_EXCERPT_LENGTH:
        excerpt += "..."
    return json.dumps({
        "type": "general",
        "message": "Here are some insights based on your query:",
        "data": {"insights": [excerpt]},
    })


@dataclass(frozen=True)
class QueryResult:
    """비즈니스 질의 결과"""
    query: str
    response: str
    cached: bool


class BusinessQueryService:
    """캐시 게이트웨이를 거치는 비즈니스 질의 처리기"""

    def __init__(
        self,
        gateway: CachedInferenceGateway,
        generator: ResilientTextGenerator,
    ):
        self.gateway = gateway
        self.generator = generator
        self.options: GenerationOptions = replace(
            generator.default_options,
            max_tokens=QUERY_MAX_TOKENS,
            temperature=QUERY_TEMPERATURE,
        )

    async def process(
        self,
        query: str,
        use_cache: bool = True,
        today: Optional[date] = None,
    ) -> QueryResult:
        """
        비즈니스 질의 처리

        Args:
            query: 사용자 질의
            use_cache: 이번 요청에 캐시를 사용할지 여부
            today: 프롬프트 날짜 (테스트용)

        Returns:
            QueryResult (cached는 이번 요청이 캐시 히트였는지 여부)

        Raises:
            UpstreamError: 생성 실패 (재시도 소진 또는 재시도 불가)
        """
        prompt = create_business_prompt(query, today)

        async def generate(text: str) -> str:
            raw = await self.generator.generate(text, self.options)
            return extract_json_response(raw)

        response, hit = await self.gateway.cached_inference_with_source(
            prompt, generate, use_cache=use_cache
        )
        return QueryResult(query=query, response=response, cached=hit)
