import html
import logging
from datetime import timedelta

from credential_service.app.services import templates
from credential_service.app.services.credential_policy import CredentialPolicy
from credential_service.app.services.notifier import DeliveryError, INotifier
from credential_service.domain.entities import Account, ErrorCode
from credential_service.libs.result import Error, Result, Return

logger = logging.getLogger(__name__)


def describe_window(window: timedelta) -> str:
    """
    Render a validity window for people, e.g. "1 hour", "90 minutes" or
    "45 seconds". Uses the largest unit that divides the window exactly.
    """
    seconds = int(window.total_seconds())
    if seconds >= 3600 and seconds % 3600 == 0:
        count, unit = seconds // 3600, "hour"
    elif seconds >= 60 and seconds % 60 == 0:
        count, unit = seconds // 60, "minute"
    else:
        count, unit = seconds, "second"
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


class NotificationDispatcher:
    """
    Renders lifecycle notifications and hands them to the notifier.

    Failure handling follows CredentialPolicy.notification_failure_is_fatal:
    - fatal: DeliveryError propagates, a refused send becomes DELIVERY_FAILED
    - non-fatal: both are logged and the send counts as done
    """

    def __init__(self, notifier: INotifier, policy: CredentialPolicy):
        self.notifier = notifier
        self.policy = policy

    async def send_welcome(self, account: Account, password: str) -> Result[None]:
        body = templates.WELCOME_HTML.format(
            username=html.escape(account.username), password=html.escape(password)
        )
        return await self._send(account, templates.WELCOME_SUBJECT, body)

    async def send_password_changed(self, account: Account) -> Result[None]:
        body = templates.PASSWORD_CHANGED_HTML.format(
            username=html.escape(account.username)
        )
        return await self._send(account, templates.PASSWORD_CHANGED_SUBJECT, body)

    async def send_recovery_code(self, account: Account, code: str) -> Result[None]:
        body = templates.RECOVERY_CODE_HTML.format(
            username=html.escape(account.username),
            code=code,
            validity=describe_window(self.policy.recovery_code_validity),
        )
        return await self._send(account, templates.RECOVERY_CODE_SUBJECT, body)

    async def _send(self, account: Account, subject: str, body: str) -> Result[None]:
        try:
            delivered = await self.notifier.send(account.email, subject, body)
        except DeliveryError as e:
            if self.policy.notification_failure_is_fatal:
                raise
            logger.warning(f"Notification '{subject}' to account {account.id} failed: {e}")
            return Return.ok(None)

        if not delivered:
            if self.policy.notification_failure_is_fatal:
                return Return.err(
                    Error(ErrorCode.DELIVERY_FAILED, "Notification could not be delivered")
                )
            logger.warning(f"Notification '{subject}' to account {account.id} was not delivered")

        return Return.ok(None)
