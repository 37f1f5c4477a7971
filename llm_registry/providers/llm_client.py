"""Abstract interface for LLM clients.

This module defines the :class:`LLMClient` abstract base class used by
the built-in clients and expected from factories registered with
:class:`llm_registry.api_registry.ProviderRegistry`.  Each client must
implement a ``chat_completion`` method that accepts a list of message
dictionaries ([{role: str, content: str}]), a ``model`` name, a
``temperature``, and any additional keyword arguments.  The method
should return an object with a ``choices`` attribute similar to
OpenAI's response schema where ``choices[0].message.content`` contains
the generated text.

Built-in clients also declare how the registry constructs them:

* ``requires_api_key`` – the registry refuses to build the client when
  no key resolves.
* ``supports_base_url`` – the registry forwards ``ProviderConfig.base_url``
  to the constructor.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    requires_api_key: bool = True
    supports_base_url: bool = False

    @abstractmethod
    def chat_completion(
        self,
        messages: List[Dict[str, Any]],
        model: str,
        temperature: float = 0.0,
        **kwargs: Any,
    ) -> Any:
        """Generate a chat completion.

        Parameters
        ----------
        messages : list of dict
            Messages in the conversation.  Each dict must have a
            ``role`` (e.g. ``"system"``, ``"user"``, ``"assistant"``) and
            ``content`` (the text of the message).
        model : str
            Identifier for the model variant (e.g. ``"gpt-4o"`` or
            ``"claude-sonnet-4-20250514"``).
        temperature : float, optional
            Controls the randomness of the output.
        **kwargs : Any
            Provider-specific options such as ``tools`` or ``max_tokens``.

        Returns
        -------
        Any
            A provider-specific response object.  Consumers should access
            ``response.choices[0].message.content`` for the text.
        """
        raise NotImplementedError
