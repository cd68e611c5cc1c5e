"""Type definitions for linearstructs."""

from typing import Literal, TypeAlias

# Backing implementation selected by new_queue()
QueueType: TypeAlias = Literal["array", "stack"]
