"""examples/async_usage.py - Inspecting coroutines.

Shows the async wrappers and the @inspected decorator on coroutine functions,
including a rejected coroutine and ``reraise=True``.

Run:
    python examples/async_usage.py
"""

import asyncio

from logify import (
    Logger,
    TargetInvocationError,
    inspect_fn_async,
    inspect_method_async_detailed,
    inspected,
    set_inspection_logger,
)

set_inspection_logger(Logger(level="debug", context="async-demo"))


class UserRepository:
    async def get(self, user_id: int) -> dict:
        await asyncio.sleep(0.01)
        return {"id": user_id, "roles": ["admin", "billing"], "active": True}


async def ping(host: str) -> float:
    await asyncio.sleep(0.01)
    return 12.5


async def flaky(host: str) -> None:
    await asyncio.sleep(0.01)
    raise ConnectionError(f"{host} unreachable")


@inspected(detailed=True)
async def load_settings(name: str) -> dict:
    await asyncio.sleep(0.01)
    return {"name": name, "retries": 3}


@inspected(reraise=True)
async def must_succeed() -> None:
    raise RuntimeError("strict mode")


async def main() -> None:
    await inspect_fn_async(ping, "db.local")
    await inspect_fn_async(flaky, "cache.local")
    await inspect_method_async_detailed(UserRepository(), "get", 7)
    await load_settings("worker")
    try:
        await must_succeed()
    except TargetInvocationError as exc:
        print(f"caught: {exc}")


if __name__ == "__main__":
    asyncio.run(main())
