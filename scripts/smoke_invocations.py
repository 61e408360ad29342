import requests
import os
import argparse
from dotenv import load_dotenv

# Argument parser for --show-all
parser = argparse.ArgumentParser(description="Send questions to a running relay and summarize the replies.")
parser.add_argument('base_url', nargs='?', default=None, help='Relay base URL (default: RELAY_URL or http://localhost:8080)')
parser.add_argument('--questions', default=None, help='File with one question per line')
parser.add_argument('--show-all', action='store_true', help='Show all questions and replies, not just failures')
args = parser.parse_args()

# Load environment variables from .env
load_dotenv()
BASE_URL = (args.base_url or os.getenv("RELAY_URL", "http://localhost:8080")).rstrip("/")

# Questions file defaults to test_questions.txt at the project root
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
QUESTIONS_FILE = args.questions or os.path.join(BASE_DIR, "test_questions.txt")

with open(QUESTIONS_FILE, "r", encoding="utf-8") as f:
    questions = [line.strip() for line in f if line.strip() and not line.strip().startswith('#')]

ping = requests.get(f"{BASE_URL}/ping", timeout=10)
print(f"/ping -> {ping.status_code} {ping.text!r}\n")

results = []
total = len(questions)

for idx, question in enumerate(questions, 1):
    response = requests.post(f"{BASE_URL}/invocations", json={"question": question}, timeout=600)
    try:
        resp_json = response.json()
    except ValueError:
        resp_json = {"reply": "Response is not JSON"}
    failed = response.status_code != 200
    results.append({
        'idx': idx,
        'question': question,
        'status': response.status_code,
        'reply': resp_json.get('reply'),
        'failed': failed
    })
    print(f"Question {idx}/{total}: {question}")
    print(f"Result: {'FAIL' if failed else 'PASS'}\n")

# Print summary
passed = sum(1 for r in results if not r['failed'])
print(f"\nPassed: {passed}/{len(results)}")

for r in results:
    if r['failed'] or args.show_all:
        print(f"\nQuestion {r['idx']}: {r['question']}")
        print(f"Status: {r['status']}")
        print(f"Reply: {r['reply']}")
