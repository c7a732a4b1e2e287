"""
Authorization, branching and audit example.

Demonstrates:
- Restricting a use case with an authorization predicate
- Choosing between two sub-trees with a Branch
- Producing a serializable audit trace of a run
"""

import asyncio
import json

from usecase_engine import Branch, Err, Ok, Step, UseCase, has_role


def is_bulk(ctx):
    return Ok() if len(ctx.req["ids"]) > 10 else Err("small batch")


def schedule(ctx):
    ctx.ret["mode"] = "scheduled"
    return Ok({"scheduled": len(ctx.req["ids"])})


def delete_now(ctx):
    ctx.ret["mode"] = "immediate"
    return Ok({"deleted": len(ctx.req["ids"])})


purge_items = UseCase(
    "Purge items",
    Branch(
        "Large purges are scheduled",
        condition=Step("More than ten items", is_bulk),
        then_branch=Step("Schedule purge", schedule),
        else_branch=Step("Delete immediately", delete_now),
    ),
    request={"ids": list[int]},
    authorize=has_role("admin"),
)


async def main() -> None:
    admin = {"id": 1, "roles": ["admin"]}
    guest = {"id": 2, "roles": []}

    result, trace = await purge_items.audit({"ids": [1, 2, 3]}, admin)
    print(result)
    print(json.dumps(trace.to_dict(), indent=2, default=str))

    result, trace = await purge_items.audit({"ids": [1]}, guest)
    print(result, trace.authorized, trace.steps)


if __name__ == "__main__":
    asyncio.run(main())
