"""Bundled word lists, one ``wordlist-<language>.txt`` per language.

These are small hand-picked samples (a few hundred English words and about
a hundred German ones), enough for the assistant and quick simulations.
Win rates and guess counts measured on them are not comparable with runs
over a full Wordle dictionary; pass ``--words`` to use one.
"""
