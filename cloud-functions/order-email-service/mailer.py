import smtplib
import ssl
from contextlib import contextmanager
from email.message import EmailMessage
from email.utils import getaddresses, make_msgid

from pydantic import BaseModel

from logger import getJSONLogger

logger = getJSONLogger('order-email-service')


class SendResult(BaseModel):
    message_id: str
    accepted: list[str]


class Mailer:
    """Delivers notification emails through the configured SMTP relay.

    Port 465 uses implicit TLS, every other port connects in plaintext and
    upgrades with STARTTLS before authenticating.
    """

    def __init__(self, config):
        self.config = config

    @contextmanager
    def connection(self):
        context = ssl.create_default_context()
        if self.config.implicit_tls:
            server = smtplib.SMTP_SSL(self.config.host, self.config.port, context=context)
        else:
            server = smtplib.SMTP(self.config.host, self.config.port)
        with server:
            if not self.config.implicit_tls:
                server.starttls(context=context)
            server.login(self.config.user, self.config.password)
            yield server

    def verify(self):
        """Check that the relay accepts our credentials.

        Failures are logged and reported as False, never raised.
        """
        try:
            with self.connection() as server:
                code, reply = server.noop()
                if code != 250:
                    raise smtplib.SMTPResponseException(code, reply)
        except (smtplib.SMTPException, OSError) as err:
            logger.warning(f"SMTP verify warning: {err}")
            return False
        return True

    def recipients(self):
        return [address for _, address in getaddresses([self.config.destination]) if address]

    def build_message(self, subject, html):
        _, at, domain = self.config.user.rpartition('@')
        message = EmailMessage()
        message['From'] = self.config.sender
        message['To'] = self.config.destination
        message['Subject'] = subject
        message['Message-ID'] = make_msgid(domain=domain if at and domain else None)
        message.set_content(html, subtype='html')
        return message

    def send(self, subject, html):
        message = self.build_message(subject, html)
        recipients = self.recipients()
        with self.connection() as server:
            refused = server.send_message(message, to_addrs=recipients)
        accepted = [address for address in recipients if address not in refused]
        return SendResult(message_id=message['Message-ID'], accepted=accepted)
