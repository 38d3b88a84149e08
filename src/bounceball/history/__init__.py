from bounceball.history.pair_history import PairHistory, pair_key

__all__ = ["PairHistory", "pair_key"]
