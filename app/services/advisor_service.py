"""
"Carioca AI" chat advisor: a local-guide persona on top of Gemini.

The advisor never raises to its callers. Without a client, or when the
request fails, it answers with a friendly fallback line instead.
"""

import asyncio
import logging
from typing import Optional

from google import genai
from google.genai import types

from app.config.settings import GeminiSettings

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """Você é o "Carioca AI", um guia local especialista e apaixonado pelo Rio de Janeiro.
Seu tom é amigável, usa algumas gírias cariocas leves (como "mermão", "valeu", "show", "fechou"), mas é sempre útil e preciso.
Dê dicas de restaurantes, bares, praias e eventos culturais.
Se o usuário perguntar por algo fora do Rio, gentilmente lembre-o que você é especialista na Cidade Maravilhosa.
Sempre formate a resposta em Markdown para facilitar a leitura."""

FALLBACK_REPLY = "Ih, deu um ruim aqui no sistema! Tenta de novo em um minutinho, valeu?"


class AdvisorService:
    def __init__(self, config: GeminiSettings, client: Optional[genai.Client] = None):
        self.config = config
        self.client = client or (genai.Client(api_key=config.api_key) if config.api_key else None)

    @property
    def configured(self) -> bool:
        return self.client is not None

    async def ask(self, prompt: str) -> str:
        if not self.client:
            logger.warning("Advisor called without a Gemini client")
            return FALLBACK_REPLY

        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(
                    self.client.models.generate_content,
                    model=self.config.model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        system_instruction=SYSTEM_INSTRUCTION,
                        temperature=self.config.chat_temperature,
                    ),
                ),
                timeout=self.config.timeout_seconds,
            )
        except Exception as e:
            logger.error(f"Advisor request failed: {e}", exc_info=True)
            return FALLBACK_REPLY

        return response.text or FALLBACK_REPLY
