"""examples/stdlib_bridge_usage.py - Feed standard ``logging`` into logify.

Existing modules keep calling ``logging.getLogger(__name__)``; a single
LogifyHandler gives their records the logify console format and, with
``to_file=True``, the per-level log files as well.

Run:
    python examples/stdlib_bridge_usage.py
"""

import logging

from logify import Logger, LogifyHandler

target = Logger(level="debug", context="bridge")
logging.basicConfig(level=logging.DEBUG, handlers=[LogifyHandler(target, to_file=True)])

logger = logging.getLogger("inventory")


if __name__ == "__main__":
    logger.debug("loaded %d items", 120)
    logger.warning("stock low for sku=%s", "A-17")
    try:
        {}["missing"]
    except KeyError:
        logger.exception("lookup failed")
    print(f"files under: {target.log_dir}")
