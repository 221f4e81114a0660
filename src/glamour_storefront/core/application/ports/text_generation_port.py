from abc import ABC, abstractmethod


class TextGenerationPort(ABC):
    """Port for the external chat-completion service.

    Implementations MUST raise ``ProviderError`` on any failure (missing
    credential, network error, timeout, non-2xx status, empty content).
    """

    @abstractmethod
    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Return the text content of the first choice."""
