"""
Package data cho spellscan.

- dictionary.csv: Dictionary mac dinh (header "word", moi dong mot tu),
  dung khi user khong chi dinh --dict
"""
