from typing import Any

from langchain_ollama import ChatOllama

from focus.core.llm import TextRequest, TextService


class OllamaTextService(TextService):
    """
    Local-model backend using LangChain's ChatOllama.
    json_mode requests go to a second client constrained to JSON output.
    """
    def __init__(self, model: str, temperature: float = 0.7, base_url: str = "http://localhost:11434"):
        self.model = model
        self._chat_llm = ChatOllama(model=model, temperature=temperature, base_url=base_url)
        self._json_llm = ChatOllama(model=model, temperature=temperature, base_url=base_url, format="json")

    async def invoke(self, request: TextRequest) -> dict[str, Any]:
        llm = self._json_llm if request.json_mode else self._chat_llm
        message = await llm.ainvoke(request.message)
        # Chat models return a message object; normalize to the remote service's payload shape.
        text = getattr(message, "content", None)
        return {"reply": text if isinstance(text, str) else str(message)}
