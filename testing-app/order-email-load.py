from locust import FastHttpUser, TaskSet, between, task
from faker import Faker
import random

fake = Faker('fr_FR')

products = [
    ('Thermomètre digital', 3500), ('Tensiomètre', 18000), ('Gants nitrile (boîte)', 4500),
    ('Masques chirurgicaux x50', 2500), ('Oxymètre de pouls', 12000), ('Gel hydroalcoolique', 1500),
]


def order_payload():
    items = [
        {'title': title, 'qty': random.randint(1, 5), 'price': price}
        for title, price in random.sample(products, random.randint(1, 4))
    ]
    return {
        'orderMeta': {
            'id': fake.uuid4(),
            'order_number': f"CMD-{random.randint(1000, 9999)}",
            'order_name': fake.name(),
            'phone': fake.phone_number(),
            'shipping_address': fake.address().replace('\n', ', '),
        },
        'items': items,
    }


class OrderBehavior(TaskSet):
    @task(10)
    def placeOrder(self):
        self.client.post("/api/send-email", json=order_payload())

    @task(1)
    def wrongMethod(self):
        with self.client.get("/api/send-email", catch_response=True) as response:
            if response.status_code == 405:
                response.success()


class StorefrontUser(FastHttpUser):
    tasks = [OrderBehavior]
    wait_time = between(1, 10)

# Point SMTP_HOST at a sink relay first, every order sends a real email.
# locust -f order-email-load.py --host=http://localhost:8080 --users=20 --spawn-rate=1
