import asyncio
import logging
import os
from typing import Callable

import discord
from dotenv import load_dotenv

from news_digest import DigestResult, NewsDigest, NewsItem, load_config
from news_digest.exceptions import NewsDigestError
from news_digest.logging import configure_logging

LOGGER = logging.getLogger(__name__)

MAX_MESSAGE_LENGTH = 2000
FAILURE_MESSAGE = "뉴스를 가져오는 중에 오류가 발생했습니다."


def format_digest_message(result: DigestResult) -> str:
    """디스코드에 보낼 요약 메시지를 만듭니다."""
    selection = result.selection
    if isinstance(selection, NewsItem):
        response = f"📰 최신 {result.document.keyword} 뉴스\n\n"
        response += f"**{selection.title or 'N/A'}**\n"
        response += f"*{selection.published_at or 'N/A'}*\n"
        if selection.link:
            response += f"<{selection.link}>\n"
    else:
        response = f"📰 {selection.render()}\n"
    response += f"\n> {result.summary.text}\n"
    response += f"\n`{result.path}`"

    # 메시지가 2000자를 초과하지 않도록 합니다.
    if len(response) > MAX_MESSAGE_LENGTH:
        response = response[:MAX_MESSAGE_LENGTH - 3] + "..."
    return response


def run_digest() -> DigestResult:
    return NewsDigest(load_config()).run()


async def reply_with_digest(channel, run: Callable[[], DigestResult] = run_digest) -> None:
    """뉴스 파이프라인을 실행하고 결과나 실패 메시지를 채널에 보냅니다."""
    await channel.send("최신 뉴스를 가져오는 중입니다... 잠시만 기다려주세요.")

    try:
        # 파이프라인은 블로킹 호출이므로 별도 스레드에서 실행합니다.
        result = await asyncio.to_thread(run)
    except NewsDigestError as e:
        LOGGER.error("뉴스 가져오기 오류: %s", e)
        await channel.send(FAILURE_MESSAGE)
        return
    except Exception:
        LOGGER.exception("뉴스 가져오기 중 예기치 않은 오류")
        await channel.send(FAILURE_MESSAGE)
        return

    await channel.send(format_digest_message(result))


def build_client() -> discord.Client:
    # Discord 클라이언트에 필요한 인텐트를 설정합니다.
    intents = discord.Intents.default()
    intents.message_content = True  # 메시지 내용을 읽기 위한 권한

    client = discord.Client(intents=intents)

    @client.event
    async def on_ready():
        """봇이 성공적으로 로그인하면 호출됩니다."""
        LOGGER.info("%s으로 성공적으로 로그인했습니다!", client.user)

    @client.event
    async def on_message(message):
        """사용자가 메시지를 보낼 때마다 호출됩니다."""
        # 봇 자신의 메시지는 무시합니다.
        if message.author == client.user:
            return

        # '!news' 명령어를 확인합니다.
        if message.content.startswith('!news'):
            await reply_with_digest(message.channel)

    return client


def main() -> None:
    # .env 파일에서 환경 변수를 로드합니다.
    load_dotenv()

    # .env 파일에 DISCORD_BOT_MPSB="YOUR_BOT_TOKEN" 형식으로 토큰을 저장해야 합니다.
    token = os.getenv("DISCORD_BOT_MPSB")
    if not token:
        raise ValueError("DISCORD_BOT_MPSB 환경 변수가 설정되지 않았습니다. .env 파일을 확인하세요.")

    configure_logging(load_config())
    build_client().run(token)


if __name__ == "__main__":
    main()
