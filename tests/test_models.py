from colorwalk.models import Outcome, Phase, RoundState


def test_state_levels_match_single_integer_encoding():
    assert RoundState.uninitialized().level == -1
    assert RoundState.playing(0).level == 0
    assert RoundState.playing(20).level == 20
    assert RoundState.result(Outcome.WIN).level == 21
    assert RoundState.result(Outcome.LOSE).level == 22
    assert RoundState.result(Outcome.LOSE, final_round=5).level == 7
    assert RoundState.result(Outcome.WIN).round == 21
    assert RoundState.result(Outcome.LOSE).round == 22


def test_state_predicates():
    assert RoundState.playing(3).is_playing
    assert not RoundState.playing(3).is_result
    win = RoundState.result(Outcome.WIN)
    assert win.is_result and win.phase is Phase.RESULT and win.outcome is Outcome.WIN
    assert not RoundState.uninitialized().is_playing
