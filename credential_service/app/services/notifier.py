from abc import ABC, abstractmethod
from typing import List, Optional, Union


class DeliveryError(Exception):
    """Raised by a notifier when the message could not be handed to the transport"""


class INotifier(ABC):
    """Outbound message channel - application layer"""

    @abstractmethod
    async def send(
        self,
        addresses: Union[str, List[str]],
        subject: str,
        html_body: str,
        attachments: Optional[List[str]] = None,
    ) -> bool:
        """
        Send an HTML message to one or more addresses.

        Args:
            addresses: Single address or list of addresses
            subject: Message subject
            html_body: HTML body
            attachments: Optional file paths to attach

        Returns:
            True if the message was accepted for delivery

        Raises:
            DeliveryError: transport failure
        """
        pass
