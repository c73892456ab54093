from __future__ import annotations

import logging
import sys

from .config import load_config
from .core import NewsDigest
from .exceptions import NewsDigestError
from .logging import configure_logging

LOGGER = logging.getLogger(__name__)


def main() -> int:
    try:
        config = load_config()
        configure_logging(config)
        config.validate()
        result = NewsDigest(config).run()
    except NewsDigestError as e:
        LOGGER.error("%s", e)
        return 1
    print(f"파일 생성 완료: {result.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
