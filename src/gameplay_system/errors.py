"""
Contract violations surfaced by the gameplay session
"""


class RoundInProgressError(RuntimeError):
    """start_round() was called while another round start is still running"""
    pass


class GameOverError(RuntimeError):
    """A new round was requested without a reset after all lives were lost"""
    pass
