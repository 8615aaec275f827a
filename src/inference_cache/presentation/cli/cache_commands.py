"""
캐시 관리 CLI 커맨드

실행 중인 서버의 관리 API를 호출합니다.

stats: 캐시 통계 및 사용률 조회
clear: 캐시 전체 삭제
query: 비즈니스 질의 실행
serve: 웹 서버 실행
"""

from typing import Any, Dict, Optional

import click
import httpx
from rich.console import Console
from rich.table import Table

from ...application.cache_admin import usage_percentage

console = Console()

DEFAULT_SERVER_URL = "http://127.0.0.1:8000"


def _client(ctx: click.Context) -> httpx.Client:
    obj = ctx.obj
    return httpx.Client(
        base_url=obj["url"],
        timeout=obj["timeout"],
        transport=obj.get("transport"),
    )


def _request(ctx: click.Context, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
    """관리 API 호출 (실패 시 ClickException)"""
    try:
        with _client(ctx) as client:
            response = client.request(method, path, **kwargs)
    except httpx.HTTPError as e:
        raise click.ClickException(f"Could not reach {ctx.obj['url']}: {e}") from e

    try:
        body = response.json()
    except ValueError as e:
        raise click.ClickException(f"Invalid response (HTTP {response.status_code})") from e

    if response.status_code >= 400 or not body.get("success", False):
        message = body.get("error") or body.get("detail") or f"HTTP {response.status_code}"
        raise click.ClickException(str(message))
    return body


def format_usage(data: Dict[str, Any]) -> str:
    """사용률 표시 문자열 (계산 불가 시 'n/a')"""
    percentage = usage_percentage(data.get("remainingSize", "unknown"), data.get("maxSize", ""))
    if percentage is None:
        return "n/a"
    return f"{percentage:.2f}%"


@click.group(name="inference-cache")
@click.option(
    "--url",
    envvar="INFERENCE_CACHE_URL",
    default=DEFAULT_SERVER_URL,
    show_default=True,
    help="서버 URL",
)
@click.option("--timeout", default=30.0, show_default=True, help="HTTP 타임아웃 (초)")
@click.pass_context
def cli(ctx: click.Context, url: str, timeout: float):
    """AI 응답 캐시 관리 커맨드"""
    ctx.ensure_object(dict)
    ctx.obj["url"] = url.rstrip("/")
    ctx.obj["timeout"] = timeout
    ctx.obj.setdefault("transport", None)


@cli.command(name="stats")
@click.pass_context
def stats_command(ctx: click.Context):
    """캐시 통계 조회"""
    data = _request(ctx, "GET", "/api/ai/cache/stats")["data"]

    table = Table(title="AI Response Cache")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Items", f"{data['itemCount']} / {data['maxItems']}")
    table.add_row("Remaining size", str(data["remainingSize"]))
    table.add_row("Max size", data["maxSize"])
    table.add_row("Usage", format_usage(data))
    table.add_row("Hits", str(data["hits"]))

    console.print(table)


@cli.command(name="clear")
@click.option("--yes", "-y", is_flag=True, help="확인 없이 삭제")
@click.pass_context
def clear_command(ctx: click.Context, yes: bool):
    """캐시 전체 삭제"""
    if not yes:
        click.confirm("Clear the AI response cache?", abort=True)

    body = _request(ctx, "POST", "/api/ai/cache/clear")
    console.print(f"[green]{body.get('message', 'Cache cleared')}[/green]")


@cli.command(name="query")
@click.argument("query")
@click.option("--no-cache", is_flag=True, help="이번 요청에 캐시를 사용하지 않음")
@click.pass_context
def query_command(ctx: click.Context, query: str, no_cache: bool):
    """비즈니스 질의 실행"""
    body = _request(
        ctx,
        "POST",
        "/api/ai/query",
        json={"query": query, "useCache": not no_cache},
    )
    data = body["data"]
    source = "cache" if data["cached"] else "model"
    console.print(f"[dim]source: {source}[/dim]")
    console.print_json(data["response"])


@cli.command(name="serve")
@click.option("--host", default=None, help="바인드 호스트 (기본: WEB_HOST)")
@click.option("--port", default=None, type=int, help="바인드 포트 (기본: WEB_PORT)")
def serve_command(host: Optional[str], port: Optional[int]):
    """웹 서버 실행"""
    from dataclasses import replace

    from dotenv import load_dotenv

    from ...infrastructure.config import load_settings
    from ..web.app import main as run_web

    load_dotenv()
    settings = load_settings()
    overrides: Dict[str, Any] = {}
    if host:
        overrides["web_host"] = host
    if port:
        overrides["web_port"] = port
    run_web(replace(settings, **overrides))


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
