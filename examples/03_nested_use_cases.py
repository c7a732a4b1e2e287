"""
Nested use cases and lifecycle hooks.

Demonstrates:
- Reusing a use case as a step of another one
- Async setup populating dependencies
- Observing every step with an AfterStep hook
"""

import asyncio
import json
from types import SimpleNamespace

from usecase_engine import AfterStep, Ok, Step, UseCase, authenticated


async def setup(ctx):
    ctx.di.clock = SimpleNamespace(now=lambda: "2024-01-01T00:00:00Z")


async def log_step(ctx, node, result):
    print(f"  {node.description}: {result}")


notify = UseCase(
    "Notify subscribers",
    Step("Send e-mails", lambda ctx: Ok({"sent": 3})),
    authorize=authenticated,
)

publish = UseCase(
    "Publish an article",
    Step("Stamp publication date", lambda ctx: Ok(ctx.di.clock.now())),
    notify,
    request={"article_id": int},
    authorize=authenticated,
    setup=setup,
    hooks=(AfterStep(log_step),),
)


async def main() -> None:
    result, trace = await publish.audit({"article_id": 7}, {"id": "editor"})
    print(result)
    print(json.dumps(trace.to_dict(), indent=2))


if __name__ == "__main__":
    asyncio.run(main())
