from webchat.client import run_console_chat


def run_chat_assistant():
    # Talks to a server started with `python -m webchat.main`
    run_console_chat()


if __name__ == "__main__":
    run_chat_assistant()
