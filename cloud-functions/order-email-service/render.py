import os

from jinja2 import Environment, FileSystemLoader, select_autoescape

from order import format_amount

CURRENCY = "XOF"
TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'templates')

env = Environment(
    loader=FileSystemLoader(TEMPLATE_DIR),
    autoescape=select_autoescape(['html', 'xml'])
)
env.filters['amount'] = format_amount
template = env.get_template('order_notification.html')


def render_subject(order):
    # Header values cannot carry line breaks.
    order_number = " ".join(order.order_meta.order_number.split())
    return f"Nouvelle commande {order_number}"


def render_html(order):
    return template.render(
        meta=order.order_meta,
        items=order.items,
        total=order.total,
        currency=CURRENCY,
    )
