from co2x.auth.utils.crypto import generate_state_token, states_match

__all__ = ["generate_state_token", "states_match"]
