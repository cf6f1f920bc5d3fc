# party_core/config.py
from __future__ import annotations
import os
import textwrap

# ===== Generation defaults =====
DEFAULT_OPTIONS = {
    "candidate_attempts": 20,
    "swap_iterations": 200,
    "balance_weight": 1.0,
    "diversity_weight": 1.0,
    "leader_weight": 1.0,
    "hard_penalty": 10000.0,     # unweighted; added once per repeated composition
    "random_seed": None,         # None = fresh entropy each run
    "max_workers": 1,
}

DEFAULT_ROUNDS = 5

OPTIONS_FILE = "options.yaml"
SAMPLE_ROSTER_FILE = "sample_roster.txt"


def ensure_assets_exist(directory: str = "assets"):
    os.makedirs(directory, exist_ok=True)
    options_path = os.path.join(directory, OPTIONS_FILE)
    if not os.path.exists(options_path):
        with open(options_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_OPTIONS_YAML)
    roster_path = os.path.join(directory, SAMPLE_ROSTER_FILE)
    if not os.path.exists(roster_path):
        with open(roster_path, "w", encoding="utf-8") as f:
            f.write(SAMPLE_ROSTER_TEXT)


# ===== Options file template =====
DEFAULT_OPTIONS_YAML = textwrap.dedent("""\
rounds: 5
candidate_attempts: 20
swap_iterations: 200
balance_weight: 1.0
diversity_weight: 1.0
leader_weight: 1.0
hard_penalty: 10000.0
random_seed: null
max_workers: 1
""")

# ===== Sample roster (name, rank per line) =====
SAMPLE_ROSTER_TEXT = textwrap.dedent("""\
Sumika, A
Rain, B
Minato, S
Yui, C
Rin, B
Takumi, A
Sakura, B
Aoi, C
Takeru, B
Mana, A
Aki, C
Hinata, D
""")
