from draftpairing.pairing.draft_swiss import generate_pairings, seat_players

__all__ = ["generate_pairings", "seat_players"]
