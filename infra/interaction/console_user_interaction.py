from __future__ import annotations


class ConsoleUserInteraction:
    """stdout implementation of UserInteractionPort."""

    async def send_info(self, message: str) -> None:
        print(message, flush=True)
