TITLE = """
+-----------------------------------+
|   J A C K S   B L A C K J A C K   |
+-----------------------------------+
"""

SUB_TITLE = "Basic strategy for the table you are sitting at"

ABOUT_US = "About"

ABOUT_US_TEXT = """Jacks Blackjack shows the basic strategy chart for a blackjack rule set.

Pick the number of decks, whether the dealer stands on soft 17,
whether doubling after a split is allowed, which surrender policy
the table offers and whether the dealer peeks for blackjack.
The calculator then shows the matching chart for hard hands,
soft hands and pairs.

When no chart was computed for the exact rules you picked,
the default chart is shown instead and the header says so.

Charts are plain JSON files. Drop a new file into the strategies
directory and it is picked up the next time the calculator opens.

Chart legend:
  H   Hit
  S   Stand
  D   Double if allowed, otherwise Hit
  Ds  Double if allowed, otherwise Stand
  P   Split
  Ph  Split if double after split is allowed, otherwise Hit
  Su  Surrender if allowed, otherwise Hit
  Rs  Surrender if allowed, otherwise Stand

Keys:
  j / k or arrows   move
  h / l or arrows   change a setting
  enter             select
  m                 main menu
  q                 quit"""

FOOTER_MENU = "j/k: move   enter: select   q: quit"
FOOTER_ABOUT = "j/k: scroll   m: menu   q: quit"
FOOTER_CALCULATOR = "j/k: choose setting   h/l: change   m: menu   q: quit"
