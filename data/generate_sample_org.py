#!/usr/bin/env python3
"""
Generate a synthetic, deliberately noisy org chart for pipeline testing.

- 6 divisions, some with prefix-sharing departments
  ("AIML Data Platform", "AIML Search Infrastructure", ...)
- Label noise in the style of scraped data:
    * role suffixes ("Team", "Group", "Org")
    * trailing punctuation and possessives
    * "(ABC)" acronyms
    * smart quotes, en/em dashes, private-use glyphs
    * punctuation-only junk keys (")", ",,", "s")
    * near-duplicate spellings ("Front-End" / "Frontend")
- Output: org_structure.json (nested label → children objects)
"""

import json
from typing import Dict, List

import numpy as np


# ---------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------

RANDOM_SEED = 42
OUT_FILE = "org_structure.json"

NOISE_PROB = 0.35      # chance a label gets decorated with noise
JUNK_PROB = 0.15       # chance a node gets a junk sibling
MAX_TEAMS = 5          # leaf teams per department


# ---------------------------------------------------------------------
# Vocabulary
# ---------------------------------------------------------------------

DIVISIONS: Dict[str, List[str]] = {
    "AIML": ["Data Platform", "Search Infrastructure", "Engineering Efficiency",
             "Infrastructure Teams", "Evaluation"],
    "Hardware Technologies": ["Silicon Engineering", "Display Engineering",
                              "Camera Hardware", "Battery Systems"],
    "Software Engineering": ["Frontend", "Front-End", "Backend Services",
                             "Build Infrastructure", "Developer Tools"],
    "Design": ["Human Interface Design", "3D Visual Merchandising",
               "3D/Visual Merchandising", "Industrial Design"],
    "Services": ["Cloud Services", "Cloud Storage", "Cloud Identity",
                 "Media Products"],
    "Operations": ["Supply Chain", "Manufacturing Design", "Quality Engineering"],
}

TEAM_NAMES = [
    "Platform", "Infrastructure", "Reliability", "Tooling", "Performance",
    "Security", "Analytics", "Research", "Quality", "Automation",
]

SUFFIXES = [" Team", " Group", " Org", " Organization", " Department", " team"]
JUNK_KEYS = [")", ",,", "s", ").", "'", "..."]


# ---------------------------------------------------------------------
# Noise
# ---------------------------------------------------------------------

def add_noise(label: str, rng: np.random.Generator) -> str:
    if rng.random() > NOISE_PROB:
        return label

    kind = rng.integers(0, 7)
    if kind == 0:
        return label + str(rng.choice(SUFFIXES))
    if kind == 1:
        return label + str(rng.choice([",", ".", "!)", ","]))
    if kind == 2:
        acronym = "".join(w[0] for w in label.split() if w[:1].isalpha()).upper()
        return f"{label} Group ({acronym})" if acronym else label
    if kind == 3:
        return f"\u201c{label}\u201d team"
    if kind == 4:
        return label.replace("-", "\u2013").replace(" ", "  ") + "\uf8ff"
    if kind == 5:
        return label.lower()
    return label + "\u2019s"


def build_org(rng: np.random.Generator) -> dict:
    org: dict = {}
    for division, departments in DIVISIONS.items():
        division_node: dict = {}
        for dept in departments:
            label = f"{division} {dept}" if division == "AIML" else dept
            n_teams = int(rng.integers(0, MAX_TEAMS + 1))
            teams = rng.choice(TEAM_NAMES, size=n_teams, replace=False)
            division_node[add_noise(label, rng)] = {
                add_noise(f"{dept} {t}", rng): {} for t in teams
            }
            if rng.random() < JUNK_PROB:
                division_node[str(rng.choice(JUNK_KEYS))] = {}
        org[add_noise(division, rng)] = division_node
    return org


# ---------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------

def main():
    rng = np.random.default_rng(RANDOM_SEED)
    org = build_org(rng)

    with open(OUT_FILE, "w", encoding="utf-8") as f:
        json.dump(org, f, indent=2, ensure_ascii=False)

    print(f"Saved {OUT_FILE} with {len(org)} top-level units")


if __name__ == "__main__":
    main()
