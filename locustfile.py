from locust import HttpUser, task, between
import random

REVIEWS = [
    "This product is absolutely amazing! Fast shipping, great quality.",
    "Terrible experience. Complete waste of money.",
    "The product is okay. It works as expected but nothing special.",
]


def generate_review():
    sentences = random.randint(1, 5)
    return " ".join(random.choice(REVIEWS) for _ in range(sentences))


class AnalyzeUser(HttpUser):
    wait_time = between(1, 2)

    @task(5)
    def analyze_review(self):
        self.client.post("/api/sentiment/analyze", json={"text": generate_review()})

    @task(1)
    def analyze_batch(self):
        texts = [generate_review() for _ in range(random.randint(2, 10))]
        self.client.post("/api/sentiment/batch", json={"texts": texts})

    @task(1)
    def performance_metrics(self):
        self.client.get("/api/metrics/performance")
