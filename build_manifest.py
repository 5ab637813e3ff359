"""Build task that writes the tool manifest for every registered tool."""
from __future__ import annotations

import argparse
import logging
from typing import Iterable

from product_tools.config import settings
from product_tools.manifest import RegistryError, generate

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("build_manifest")


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=f"Generate tool schemas from {settings.registry_path} into {settings.manifest_path}"
    )
    parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(level=logging.getLevelName(settings.log_level.upper()), format=LOG_FORMAT, force=True)
    try:
        generate(settings.registry_path, settings.manifest_path)
    except RegistryError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
