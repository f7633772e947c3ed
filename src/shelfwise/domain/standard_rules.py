"""Standard shelf-life acceptance tiers.

These tables encode externally mandated receiving thresholds. Boundaries and
window magnitudes must not be changed casually: publish an alternate rule book
(see `shelfwise.adapters.rule_files`) to simulate a regulatory update.

T is the product's total shelf-life. Months are 30-day months.
"""

from .rule_table import RuleBook, ShelfLifeRule
from .value_objects import RuleMode

# pylint: disable=line-too-long

STANDARD_VERSION = "standard"

ABS = RuleMode.ABSOLUTE
REL = RuleMode.RELATIVE

# fmt: off
DOMESTIC_RULES: tuple[ShelfLifeRule, ...] = (
    ShelfLifeRule(1080, None, 750, 540, "25 months", "18 months", "T ≥ 36 months", ABS),
    ShelfLifeRule(900, 1080, 630, 450, "21 months", "15 months", "30 months ≤ T < 36 months", ABS),
    ShelfLifeRule(720, 900, 510, 360, "17 months", "12 months", "24 months ≤ T < 30 months", ABS),
    ShelfLifeRule(540, 720, 390, 270, "13 months", "9 months", "18 months ≤ T < 24 months", ABS),
    ShelfLifeRule(450, 540, 330, 210, "11 months", "7 months", "15 months ≤ T < 18 months", ABS),
    ShelfLifeRule(360, 450, 270, 150, "9 months", "5 months", "12 months ≤ T < 15 months", ABS),
    ShelfLifeRule(300, 360, 225, 135, "7.5 months", "4.5 months", "10 months ≤ T < 12 months", ABS),
    ShelfLifeRule(270, 300, 210, 120, "7 months", "4 months", "9 months ≤ T < 10 months", ABS),
    ShelfLifeRule(240, 270, 180, 105, "6 months", "3.5 months", "8 months ≤ T < 9 months", ABS),
    ShelfLifeRule(210, 240, 160, 90, "160 days", "3 months", "7 months ≤ T < 8 months", ABS),
    ShelfLifeRule(180, 210, 140, 70, "140 days", "70 days", "6 months ≤ T < 7 months", ABS),
    ShelfLifeRule(150, 180, 120, 60, "4 months", "2 months", "5 months ≤ T < 6 months", ABS),
    ShelfLifeRule(120, 150, 90, 45, "3 months", "45 days", "4 months ≤ T < 5 months", ABS),
    ShelfLifeRule(90, 120, 60, 40, "2 months", "40 days", "3 months ≤ T < 4 months", ABS),
    ShelfLifeRule(75, 90, 50, 30, "50 days", "1 month", "2.5 months ≤ T < 3 months", ABS),
    ShelfLifeRule(60, 75, 45, 20, "45 days", "20 days", "2 months ≤ T < 2.5 months", ABS),
    ShelfLifeRule(45, 60, 35, 20, "35 days", "20 days", "1.5 months ≤ T < 2 months", ABS),
    ShelfLifeRule(30, 45, 25, 20, "25 days", "20 days", "1 month ≤ T < 1.5 months", ABS),
    ShelfLifeRule(16, 30, 4, 6, "D+4 days", "D+6 days", "16 days ≤ T < 30 days", REL),
    ShelfLifeRule(10, 16, 3, 4, "D+3 days", "D+4 days", "10 days ≤ T < 16 days", REL),
    ShelfLifeRule(6, 10, 1, 2, "D+1 day", "D+2 days", "6 days ≤ T < 10 days", REL),
    ShelfLifeRule(3, 6, 1, 1.5, "D+1 day", "D+1.5 days", "3 days ≤ T < 6 days", REL),
    ShelfLifeRule(0, 3, 0, 0, "D+0 days", "D+0 days", "T < 3 days", REL),
)

# Imported goods have no short-life tiers: anything under 2.5 months falls in
# the lowest tier.
IMPORT_RULES: tuple[ShelfLifeRule, ...] = (
    ShelfLifeRule(1080, None, 630, 540, "21 months", "18 months", "T ≥ 36 months (imported)", ABS),
    ShelfLifeRule(900, 1080, 510, 450, "17 months", "15 months", "30 months ≤ T < 36 months (imported)", ABS),
    ShelfLifeRule(720, 900, 420, 360, "14 months", "12 months", "24 months ≤ T < 30 months (imported)", ABS),
    ShelfLifeRule(540, 720, 300, 270, "10 months", "9 months", "18 months ≤ T < 24 months (imported)", ABS),
    ShelfLifeRule(450, 540, 240, 210, "8 months", "7 months", "15 months ≤ T < 18 months (imported)", ABS),
    ShelfLifeRule(360, 450, 180, 150, "6 months", "5 months", "12 months ≤ T < 15 months (imported)", ABS),
    ShelfLifeRule(300, 360, 150, 135, "5 months", "4.5 months", "10 months ≤ T < 12 months (imported)", ABS),
    ShelfLifeRule(270, 300, 135, 120, "4.5 months", "4 months", "9 months ≤ T < 10 months (imported)", ABS),
    ShelfLifeRule(240, 270, 120, 105, "4 months", "3.5 months", "8 months ≤ T < 9 months (imported)", ABS),
    ShelfLifeRule(210, 240, 105, 90, "3.5 months", "3 months", "7 months ≤ T < 8 months (imported)", ABS),
    ShelfLifeRule(180, 210, 85, 70, "85 days", "70 days", "6 months ≤ T < 7 months (imported)", ABS),
    ShelfLifeRule(150, 180, 70, 60, "70 days", "2 months", "5 months ≤ T < 6 months (imported)", ABS),
    ShelfLifeRule(120, 150, 55, 45, "55 days", "45 days", "4 months ≤ T < 5 months (imported)", ABS),
    ShelfLifeRule(90, 120, 45, 40, "45 days", "40 days", "3 months ≤ T < 4 months (imported)", ABS),
    ShelfLifeRule(75, 90, 35, 30, "35 days", "1 month", "2.5 months ≤ T < 3 months (imported)", ABS),
    ShelfLifeRule(0, 75, 25, 20, "25 days", "20 days", "T < 2.5 months (imported)", ABS),
)
# fmt: on

STANDARD_RULEBOOK = RuleBook.build(DOMESTIC_RULES, IMPORT_RULES, STANDARD_VERSION)
