# =============================================================================
# core/capability.py  —  The generic tool pipeline
# =============================================================================
#
# Every tool in this server is the same four steps:
#
#   1. validate   raw arguments → args model           (ArgumentError)
#   2. request    args model   → (path, query)
#   3. fetch      one GET on the API                   (RemoteCallError)
#   4. render     document     → Markdown text
#
# A Capability bundles the three per-tool pieces (schema, request mapping,
# renderer).  The domain modules (core/elections.py, core/votes.py, ...)
# declare one Capability per tool; invoke() is the only code path that runs
# them.  Nothing is caught: every error reaches the caller unchanged.
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

from pydantic import ValidationError

from core.api import TransparenceClient
from core.errors import ArgumentError
from core.schemas import ToolArgs

logger = logging.getLogger(__name__)

ArgsT = TypeVar("ArgsT", bound=ToolArgs)

Query = Mapping[str, Any]
Request = tuple[str, Optional[Query]]


def validation_to_argument_error(name: str, exc: ValidationError) -> ArgumentError:
    """Turn pydantic's first error into an ArgumentError naming the field."""
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or name
    return ArgumentError(field, first.get("msg", str(exc)))


@dataclass(frozen=True)
class Capability(Generic[ArgsT]):
    """One tool: schema + request mapping + renderer."""

    name: str
    description: str
    schema: type[ArgsT]
    request: Callable[[ArgsT], Request]
    render: Callable[[Any, ArgsT], str]

    def parse(self, arguments: Mapping[str, Any]) -> ArgsT:
        try:
            return self.schema.model_validate(dict(arguments))
        except ValidationError as exc:
            raise validation_to_argument_error(self.name, exc) from exc

    async def invoke(self, client: TransparenceClient, **arguments: Any) -> str:
        """Run the tool end to end and return the rendered report.

        Arguments explicitly passed as None are treated as not given, so
        optional filters fall back to the schema defaults.
        """
        args = self.parse({k: v for k, v in arguments.items() if v is not None})
        path, query = self.request(args)
        logger.debug("%s → %s", self.name, path)
        document = await client.fetch(path, query)
        return self.render(document, args)
