import functions_framework
from config import SmtpConfig
from logger import getJSONLogger
from mailer import Mailer
from order import load_order_request
from render import render_html, render_subject

logger = getJSONLogger('order-email-service')
config = SmtpConfig()


@functions_framework.http
def send_email(request):
    return notify_order(request, config)


def notify_order(request, config, mailer_class=Mailer):
    if request.method != "POST":
        return {"error": "Method not allowed"}, 405, {"Allow": "POST"}

    if not config.is_ready():
        logger.error("SMTP credentials not configured (SMTP_USER/SMTP_PASS)")
        return {"error": "SMTP credentials not configured"}, 500

    try:
        order = load_order_request(request)
        logger.info(f"A request to send the notification for order {order.order_meta.order_number} has been received.")

        mailer = mailer_class(config)
        mailer.verify()

        result = mailer.send(render_subject(order), render_html(order))
    except Exception as err:
        logger.exception(f"Error sending order notification: {err}")
        return {"error": str(err) or "send failed"}, 500

    logger.info(f"Order notification {result.message_id} accepted for {', '.join(result.accepted)}")
    return {"ok": True, "messageId": result.message_id, "accepted": result.accepted}, 200
