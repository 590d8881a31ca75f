from .controller import GameController, HUMAN_MARK, COMPUTER_MARK, FALLBACK_ADVISORY

__all__ = ["GameController", "HUMAN_MARK", "COMPUTER_MARK", "FALLBACK_ADVISORY"]
