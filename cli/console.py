"""Console UI for the quiz arcade."""

import time

import requests

from cli.api_client import QuizAPIClient

POLL_SECONDS = 0.2
POLL_TIMEOUT = 5.0


class ConsoleUI:
    """Console user interface walking a player through one game."""

    def __init__(self, client: QuizAPIClient, game: str = None, seed: int = None):
        self.client = client
        self.game = game
        self.seed = seed

    def choose(self, title: str, options: list[tuple[str, str]]) -> str | None:
        """Numbered menu. Returns the chosen key, or None for 'back'."""
        print(f'\n{title}')
        for i, (_, label) in enumerate(options, 1):
            print(f'  {i}. {label}')
        print('  0. Back')
        while True:
            choice = input('==> ').strip()
            if choice in ('0', 'back', 'exit'):
                return None
            if choice.isdigit() and 1 <= int(choice) <= len(options):
                return options[int(choice) - 1][0]
            print('Please pick a number from the list.')

    def print_challenge(self, state: dict):
        challenge = state['challenge']
        combo = state['combo']
        print('\n' + '=' * 50)
        header = f"Question {state['challenge_index'] + 1}/{state['challenge_count']}  Score: {state['score']}"
        if combo['multiplier'] > 1:
            header += f"  Combo x{combo['multiplier']}"
        if combo['on_fire']:
            header += '  ON FIRE!'
        print(header)
        if state['time_remaining'] is not None:
            print(f"Time: {state['time_remaining']}s")
        print('=' * 50)
        if challenge['display_hint']:
            print(f"\n  {challenge['display_hint']}")
        print(f"\n>>> {challenge['prompt']}")
        if challenge.get('hint'):
            print(f"Hint: {challenge['hint']}")
        for i, option in enumerate(challenge['options'], 1):
            print(f"  {i}. {option['text']}")

    def print_feedback(self, feedback: dict):
        if feedback['skipped']:
            print(f"Skipped. The answer was {feedback['correct_answer']}.")
        elif feedback['is_correct']:
            print(f"Correct! +{feedback['points_earned']}")
        else:
            print(f"Wrong. The answer was {feedback['correct_answer']}.")
        if feedback.get('explanation'):
            print(f"  {feedback['explanation']}")

    def print_results(self, state: dict, game: str):
        result = state['last_result']
        bonus = result['bonus_points']
        print('\n' + '=' * 50)
        print('ROUND COMPLETE')
        print('=' * 50)
        print(f"Score: {result['score']}")
        print(f"Stars: {'*' * result['stars']}{'.' * (3 - result['stars'])}")
        print(f"Correct: {result['correct_answers']}/{result['total_questions']} "
              f"({result['accuracy']:.0f}%)")
        print(f"Best streak: {result['highest_streak']}")
        print(f"Bonuses: streak {bonus['streak']}, speed {bonus['speed']}, "
              f"perfect {bonus['perfect']}, no hints {bonus['no_hints']}")
        if result['perfect_round']:
            print('*** PERFECT ROUND! ***')
        for level_id in state['unlocked_levels']:
            print(f'Unlocked level {level_id}!')
        progress = self.client.get_progress(game)
        print(f"Rank: {progress['rank']['label']} ({progress['learned_count']} learned, "
              f"{progress['total_stars']}/{progress['max_stars']} stars)")
        print('=' * 50)

    def wait_for(self, predicate) -> dict:
        """Poll the session until predicate(state) holds or the wait times out."""
        deadline = time.monotonic() + POLL_TIMEOUT
        state = self.client.get_state()
        while not predicate(state) and time.monotonic() < deadline:
            time.sleep(POLL_SECONDS)
            state = self.client.get_state()
        return state

    def pick_game(self) -> str | None:
        games = self.client.list_games()
        return self.choose('Choose a game:', [(g['key'], g['title']) for g in games])

    def select_level(self, state: dict) -> dict | None:
        """Drive mode, group and level selection. Returns the state once a round is counting down."""
        while True:
            match state['phase']:
                case 'menu':
                    return None
                case 'mode-select':
                    mode = self.choose('Choose a mode:', list(state['modes'].items()))
                    if mode is None:
                        _, state = self.client.send('back')
                    else:
                        _, state = self.client.send('select_mode', mode)
                case 'sub-select':
                    group = self.choose('Choose where to play:', list(state['groups'].items()))
                    if group is None:
                        _, state = self.client.send('back')
                    else:
                        _, state = self.client.send('select_group', group)
                case 'level-select':
                    options = []
                    for level in state['levels']:
                        stars = '*' * level['stars']
                        lock = '' if level['unlocked'] else ' [locked]'
                        options.append((level['id'], f"{level['name']} {stars}{lock}"))
                    level_id = self.choose('Choose a level:', options)
                    if level_id is None:
                        _, state = self.client.send('back')
                        continue
                    accepted, state = self.client.send('select_level', level_id)
                    if not accepted:
                        print('That level is still locked.')
                case _:
                    return state

    def play_round(self, state: dict) -> dict:
        print('\nGet ready...')
        state = self.wait_for(lambda s: s['phase'] != 'countdown')
        while state['phase'] in ('playing', 'paused'):
            if state['phase'] == 'paused':
                input('Paused. Press Enter to resume.')
                _, state = self.client.send('resume')
                continue

            self.print_challenge(state)
            index = state['challenge_index']
            challenge_id = state['challenge']['id']
            user_input = input('==> ').strip().lower()

            if user_input == 'hint':
                accepted, state = self.client.send('use_hint')
                if not accepted:
                    print('No hints left for this question.')
                continue
            if user_input == 'pause':
                _, state = self.client.send('pause')
                continue
            if user_input in ('quit', 'exit'):
                _, state = self.client.send('quit')
                return state
            if user_input == 'skip':
                accepted, state = self.client.send('skip', challenge_id=challenge_id)
            elif user_input.isdigit() and 1 <= int(user_input) <= len(state['challenge']['options']):
                option = state['challenge']['options'][int(user_input) - 1]
                accepted, state = self.client.send('submit_answer', option['id'], challenge_id)
            else:
                print('Type an option number, or hint, skip, pause, quit.')
                continue

            if not accepted:
                print("Time's up!")
            if state.get('last_answer'):
                self.print_feedback(state['last_answer'])
            state = self.wait_for(lambda s: s['phase'] != 'playing' or s['challenge_index'] != index)
        return state

    def run(self):
        """Run the main application loop."""
        # Check server connection
        try:
            health = self.client.health_check()
            print(f"Connected to quiz server ({health['service']})")
        except requests.RequestException:
            print(f"Error: Cannot connect to server at {self.client.base_url}")
            print("Make sure the server is running: python run_server.py")
            return

        print('Commands while playing: option number, "hint", "skip", "pause", "quit"\n')

        if self.game is not None:
            known = [g['key'] for g in self.client.list_games()]
            if self.game not in known:
                print(f"Error: Unknown game '{self.game}'. Choose from: {', '.join(known)}")
                return
            self.play_game(self.game)
            return

        while True:
            game = self.pick_game()
            if game is None:
                print('Goodbye!')
                return
            self.play_game(game)

    def play_game(self, game: str):
        """One session of a game, from level select until the player backs out."""
        state = self.client.start_session(game, seed=self.seed)
        try:
            while True:
                state = self.select_level(state)
                if state is None:
                    break
                state = self.play_round(state)
                if state['phase'] != 'results':
                    continue
                self.print_results(state, game)
                choice = self.choose('What next?', [
                    ('next_level', 'Next level'),
                    ('retry', 'Play again'),
                    ('back', 'Level select'),
                ])
                _, state = self.client.send(choice or 'quit')
        finally:
            self.client.end_session()
