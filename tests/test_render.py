from order import parse_order_request
from render import render_html, render_subject


def test_subject_carries_order_number(sample_payload):
    assert render_subject(parse_order_request(sample_payload)) == "Nouvelle commande CMD-0042"


def test_html_lists_items_and_total(sample_payload):
    html = render_html(parse_order_request(sample_payload))

    assert "Nouvelle commande CMD-0042" in html
    assert "Awa Diop" in html
    assert "Rue 10, Dakar" in html
    assert "500 XOF" in html
    assert "<strong>2000 XOF</strong>" in html
    assert "ID commande interne: 4711" in html


def test_item_title_is_escaped():
    html = render_html(parse_order_request({"items": [{"title": "<script>", "qty": 1, "price": 1}]}))

    assert "&lt;script&gt;" in html
    assert "<script>" not in html


def test_every_meta_field_is_escaped():
    payload = {
        "orderMeta": {
            "id": "<i>",
            "order_number": "\"quoted\"",
            "order_name": "Tom & Jerry",
            "phone": "'1'",
            "shipping_address": "<b>home</b>",
        }
    }
    html = render_html(parse_order_request(payload))

    assert "<i>" not in html
    assert "<b>home</b>" not in html
    assert "Tom &amp; Jerry" in html
    assert "&#39;1&#39;" in html
    assert "\"quoted\"" not in html


def test_empty_order_renders_zero_total():
    html = render_html(parse_order_request({}))

    assert "<strong>0 XOF</strong>" in html
    assert "ID commande interne: </p>" in html


def test_sub_cent_total_is_not_rounded():
    html = render_html(parse_order_request({"items": [{"qty": 1, "price": 0.004}]}))

    assert "<strong>0.004 XOF</strong>" in html


def test_line_breaks_in_order_number_are_collapsed_in_subject():
    order = parse_order_request({"orderMeta": {"order_number": "CMD-1\r\nX"}})

    assert render_subject(order) == "Nouvelle commande CMD-1 X"
