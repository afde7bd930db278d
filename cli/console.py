"""Console UI for kanadrill."""

import time

from cli.api_client import DrillAPIClient


class ConsoleUI:
    """Console user interface for the pick drill."""

    def __init__(self, client: DrillAPIClient):
        self.client = client
        self.session_id = None  # Active session, ended on close()

    def print_groups(self, groups: list[dict]):
        print('\nAvailable groups:')
        for group in groups:
            print(f"  {group['index']:>2}. {group['name']} ({group['size']})")

    def print_round(self, current: dict):
        """Print the prompt and the numbered options."""
        direction = 'kana -> romaji' if current['mode'] == 'forward' else 'romaji -> kana'
        print('\n' + '=' * 40)
        print(f"[{direction}]")
        print(f"\n    {current['prompt']}\n")
        for i, option in enumerate(current['options'], start=1):
            marker = ' (x)' if option in current['wrong_selected'] else ''
            print(f"  {i}. {option}{marker}")
        print('=' * 40)

    def print_status(self, session: dict):
        """Print score and accuracy."""
        stats = session['stats']
        print('\n' + '=' * 40)
        print('STATUS')
        print('=' * 40)
        print(f"Score: {stats['score']}")
        print(f"Correct: {stats['correct_answers']} | Wrong: {stats['wrong_answers']} "
              f"| Accuracy: {stats['accuracy_display']}")
        if stats.get('average_answer_time') is not None:
            print(f"Average answer time: {stats['average_answer_time']:.1f}s")
        print(f"Mode: {session['mode']} (streak {session['consecutive_correct']})")
        print('=' * 40 + '\n')

    def print_weights(self, weights: dict):
        """Print the characters with the highest weights first."""
        if not weights:
            print('No weights yet.')
            return
        print('\n--- WEIGHTS ---')
        ranked = sorted(weights.items(), key=lambda item: item[1]['weight'], reverse=True)
        for key, info in ranked[:15]:
            print(f"  {key}: {info['weight']:.2f}")
        print('---------------')

    def resolve_choice(self, user_input: str, current: dict) -> str | None:
        """Map "1"-"3" or a literal option to an option value."""
        options = current['options']
        if user_input.isdigit():
            index = int(user_input) - 1
            if 0 <= index < len(options):
                return options[index]
            return None
        if user_input in options:
            return user_input
        return None

    def close(self):
        """End the active session, if any, so the server can free it."""
        if self.session_id is None:
            return
        session_id, self.session_id = self.session_id, None
        try:
            self.client.end_session(session_id)
        except Exception as e:
            print(f"Error ending session: {e}")

    def run(self, groups: list[int]):
        """Run the drill loop."""
        try:
            health = self.client.health_check()
            print(f"Connected to kanadrill server ({health['service']})")
        except Exception:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return

        if not groups:
            self.print_groups(self.client.get_groups())
            print('\nNo groups selected. Use --groups, e.g. --groups 0 1')
            return

        try:
            session = self.client.start_session(groups)
        except Exception as e:
            print(f"Error starting session: {e}")
            return
        self.session_id = session['session_id']
        current = session['round']

        print('Commands: 1-3 or the answer itself, "status", "weights", "exit"\n')

        started = time.monotonic()
        while True:
            self.print_round(current)
            user_input = input('==> ').strip()

            if user_input.lower() == 'exit':
                result = self.client.end_session(self.session_id)
                self.session_id = None
                print(f"Final score: {result['stats']['score']}. Goodbye!")
                return

            if user_input.lower() == 'status':
                self.print_status(self.client.get_session(self.session_id))
                continue

            if user_input.lower() == 'weights':
                self.print_weights(self.client.get_weights())
                continue

            choice = self.resolve_choice(user_input, current)
            if choice is None or choice in current['wrong_selected']:
                print('Pick one of the remaining options.')
                continue

            answer_ms = int((time.monotonic() - started) * 1000)
            try:
                result = self.client.submit_answer(self.session_id, choice, answer_ms)
            except Exception as e:
                print(f"Error submitting answer: {e}")
                continue

            mark = 'OK' if result['correct'] else 'X'
            print(f"\n{result['feedback']}  [{mark}]  score: {result['score']}")
            current = result['round']
            if result['correct']:
                started = time.monotonic()
