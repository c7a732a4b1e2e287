"""
Basic usage example of usecase-engine.

Demonstrates:
- Declaring a use case as an ordered list of named steps
- Injecting a repository through a typed dependency object
- Running it and reading the generated documentation
"""

import asyncio
import json
from dataclasses import dataclass, field

from usecase_engine import (
    Err,
    ExecutionContext,
    Ok,
    Step,
    UseCase,
    ValidateRequest,
    configure_logging,
)


@dataclass
class Item:
    list_id: int
    name: str


class ListRepository:
    """In-memory stand-in for a real repository."""

    def __init__(self) -> None:
        self.lists: dict[int, list[Item]] = {1: []}

    async def get(self, list_id: int) -> list[Item] | None:
        return self.lists.get(list_id)

    async def add(self, item: Item) -> Item:
        self.lists[item.list_id].append(item)
        return item


@dataclass
class Dependencies:
    repository: ListRepository = field(default_factory=ListRepository)


REQUEST = {"list_id": int, "name": str}


async def check_list_exists(ctx: ExecutionContext) -> Ok | Err:
    found = await ctx.di.repository.get(ctx.ret["request"].list_id)
    if found is None:
        return Err("List not found")
    return Ok()


async def save_item(ctx: ExecutionContext) -> Ok | Err:
    request = ctx.ret["request"]
    item = await ctx.di.repository.add(Item(request.list_id, request.name))
    return Ok(item)


repository = ListRepository()

add_item = UseCase(
    "Add an item to a todo list",
    ValidateRequest(REQUEST),
    Step("Check the list exists", check_list_exists),
    Step("Save the item", save_item),
    request=REQUEST,
    dependencies=lambda: Dependencies(repository=repository),
)


async def main() -> None:
    configure_logging()
    print(await add_item.run({"list_id": 1, "name": "Buy milk"}))
    print(await add_item.run({"list_id": 2, "name": "Nope"}))
    print(json.dumps(add_item.doc(), indent=2))


if __name__ == "__main__":
    asyncio.run(main())
