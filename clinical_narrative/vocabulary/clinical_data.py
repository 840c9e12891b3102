"""
Untagged clinical phrase tables used to fill in interventions.

These lists feed the chip selectors and dropdowns of the builder. They carry
no tags and are never relevance-filtered; goals, impairments and cueing
purposes live in their tagged modules instead.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional


class AssistanceLevel(NamedTuple):
    """FIM-based assistance level and the abbreviation used in notes."""

    name: str
    abbrev: str


ASSISTANCE_LEVELS: tuple[AssistanceLevel, ...] = (
    AssistanceLevel("Independent", "I"),
    AssistanceLevel("Modified Independent", "Mod I"),
    AssistanceLevel("Supervision/SBA", "SBA"),
    AssistanceLevel("Contact Guard Assist", "CGA"),
    AssistanceLevel("Minimal Assistance", "Min A"),
    AssistanceLevel("Minimal Assistance x2", "Min Ax2"),
    AssistanceLevel("Moderate Assistance", "Mod A"),
    AssistanceLevel("Moderate Assistance x2", "Mod Ax2"),
    AssistanceLevel("Maximal Assistance", "Max A"),
    AssistanceLevel("Maximal Assistance x2", "Max Ax2"),
    AssistanceLevel("Dependent", "Dep"),
)

INDEPENDENT = "Independent"


def assistance_abbrev(name: str) -> Optional[str]:
    """Look up the abbreviation for an assistance level name."""
    for level in ASSISTANCE_LEVELS:
        if level.name == name:
            return level.abbrev
    return None


# ── Intervention categories by CPT code ──────────────────────────────────────

_CATEGORIES_BY_CPT = {
    "97530": [
        # Balance & Mobility
        "Dynamic sitting balance tasks",
        "Static sitting balance tasks",
        "Dynamic standing balance tasks",
        "Static standing balance tasks",
        "Functional transfer training",
        "Sit-to-stand transfer training",
        "Bed mobility training",
        "W/c mobility training",
        # Coordination & Motor
        "Bilateral coordination tasks",
        "Fine motor coordination training",
        "Gross motor coordination training",
        "Visual-motor integration tasks",
        "Cognitive-motor dual tasks",
        # Functional
        "Functional strengthening activities",
        "Functional reaching activities",
        "Safety awareness training",
        "Energy conservation training",
        "Body mechanics training",
        "Barrier access/management training",
    ],
    "97535": [
        # Self-Care ADLs
        "UB dressing training",
        "LB dressing training",
        "Bathing/showering training",
        "Grooming/hygiene training",
        "Self-feeding training",
        "Toileting training",
        # IADLs
        "Medication management training",
        "Meal preparation training",
        "Light housekeeping tasks",
        "Laundry tasks",
        "Home management training",
        # Functional Mobility for ADLs
        "Functional mobility for ADLs",
        "Bathroom navigation training",
        "Community reintegration",
    ],
    "97110": [
        # UE Exercises
        "BUE strengthening exercises",
        "RUE strengthening exercises",
        "LUE strengthening exercises",
        "BUE theraband exercises",
        "BUE AROM exercises",
        "BUE AAROM exercises",
        # LE Exercises
        "BLE strengthening exercises",
        "RLE strengthening exercises",
        "LLE strengthening exercises",
        "BLE theraband exercises",
        # Core & Trunk
        "Core stabilization exercises",
        "Trunk stabilization exercises",
        "Postural alignment exercises",
        # ROM & Flexibility
        "ROM exercises",
        "Gentle stretching exercises",
        "Flexibility exercises",
        # Endurance
        "Endurance/activity tolerance training",
    ],
    "97112": [
        # Balance
        "Balance retraining",
        "Postural control training",
        "Weight shifting training",
        "Righting reactions training",
        # Motor Control
        "Motor control training",
        "Motor planning activities",
        "Coordination training",
        "Proprioceptive training",
        # Trunk
        "Trunk control training",
        "Trunk mobilization activities",
        # Neuro-specific
        "Selective motor control techniques",
        "Isolated movement training",
        "Sensory processing training",
    ],
}

CATEGORIES_BY_CPT: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {code: tuple(categories) for code, categories in _CATEGORIES_BY_CPT.items()}
)


# ── Activity options by category ─────────────────────────────────────────────
# Display list for every category; only some categories also have tagged
# activities (see activities.py).

_ACTIVITY_OPTIONS = {
    # Balance activities
    "Dynamic sitting balance tasks": [
        "throwing/catching tasks to facilitate trunk control",
        "anterior weight shifting while seated EOB",
        "lateral weight shifting while seated EOB",
        "reaching outside BOS while seated",
        "ball toss activity from w/c",
        "sequenced number tap activity bilaterally",
        "item retrieval incorporating lateral scooting",
        "tabletop activity crossing midline",
    ],
    "Static sitting balance tasks": [
        "sitting unsupported EOB",
        "sitting balance on compliant surface",
        "maintaining upright posture in w/c",
        "trunk control with B UE weight bearing",
    ],
    "Dynamic standing balance tasks": [
        "weight shifting in standing with RW",
        "reaching outside BOS in standing",
        "ball toss/catch in standing",
        "stepping over obstacles",
        "tandem stance activities",
        "single leg stance",
        "turning and pivoting",
        "backward diagonal stepping with trunk rotation",
        "item retrieval in standing with RW",
    ],
    "Functional transfer training": [
        "w/c to bed SPT",
        "bed to w/c SPT",
        "w/c to toilet SPT",
        "w/c to mat table SPT",
        "scooting pivot transfers",
        "sliding board transfers",
        "car transfer simulation",
    ],
    "Sit-to-stand transfer training": [
        "STS from firm chair",
        "STS from w/c",
        "STS from compliant surface",
        "STS from low surface",
        "STS without UE support",
        "STS with RW",
    ],
    "Bed mobility training": [
        "supine to sit EOB",
        "sit to supine",
        "rolling side to side",
        "scooting in bed",
        "bridging activities",
        "log rolling technique",
        "use of bed rails for mobility",
    ],
    "Fine motor coordination training": [
        "pegboard activities",
        "knot untying/tying from theraband",
        "clothespin retrieval/placement",
        "cracking plastic eggs with pegs inside",
        "bead stringing tasks",
        "coin manipulation",
        "card turning tasks",
        "writing/coloring tasks",
        "button board practice",
        "theraputty manipulation",
        "grasp and release tasks",
    ],
    "Gross motor coordination training": [
        "ring toss activity using large lightweight rings",
        "ball toss activities",
        "wrist roller activity with rope and dowel bar",
        "bilateral manipulation tasks",
        "folding tasks",
        "item transport tasks",
    ],
    "Functional reaching activities": [
        "floor level reaching from seated position",
        "overhead reaching activities",
        "functional reaching towards BLE",
        "figure-4 cone reaches",
        "hip hinge with item retrieval",
        "forward reaching with anterior weight shift",
        "posterior reaching tasks",
    ],
    # Self-care activities
    "UB dressing training": [
        "donning/doffing pullover shirt",
        "donning/doffing button-front shirt",
        "donning/doffing bra using one-handed technique",
        "managing fasteners",
        "one-handed dressing techniques",
        "UE threading with theraband loop",
        "clothespin retrieval from UB clothing",
        "hula hoop UB dressing prep",
    ],
    "LB dressing training": [
        "donning/doffing pants",
        "donning/doffing socks",
        "donning/doffing shoes",
        "R/L LE threading with theraband loop",
        "using long-handled shoe horn",
        "using sock aid",
        "using reacher for LE dressing",
        "clothespin retrieval from LB clothing",
        "pool noodle LB dressing prep",
        "cross leg technique for LB dressing",
    ],
    "Bathing/showering training": [
        "UB washing tasks",
        "LB washing tasks",
        "hair washing",
        "transfer to/from shower chair",
        "grab bar use",
        "long-handled sponge use",
        "water temperature management",
        "safety training on wet surfaces",
    ],
    "Toileting training": [
        "clothing management for toileting",
        "toilet transfers with grab bar",
        "hygiene tasks after toileting",
        "raised toilet seat use",
        "LB hygiene tasks",
        "brief change/management",
    ],
    "Self-feeding training": [
        "utensil management",
        "hand to mouth sequence",
        "cup/glass management",
        "scoop dish use",
        "weighted utensil use",
        "adaptive equipment training",
    ],
    # Therapeutic exercise
    "BUE strengthening exercises": [
        "shoulder flexion/extension",
        "shoulder abduction/adduction",
        "elbow flexion/extension",
        "scapular retraction/protraction",
        "bicep curls with weights",
        "theraband pulls",
        "modified w/c push-ups",
    ],
    "Core stabilization exercises": [
        "abdominal bracing",
        "pelvic tilts",
        "bridging exercises",
        "seated trunk rotation",
        "quadruped activities",
    ],
    "BLE strengthening exercises": [
        "hip flexion exercises",
        "hip abduction exercises",
        "knee extension exercises",
        "ankle DF/PF exercises",
        "theraband exercises for BLE",
        "cone stepping over threshold",
    ],
    # Neuro re-ed
    "Balance retraining": [
        "weight shifting anterior/posterior",
        "weight shifting lateral",
        "perturbation training",
        "foam surface activities",
        "righting reactions training",
    ],
    "Motor control training": [
        "isolated movement training",
        "selective motor control techniques",
        "tapping/vibration to facilitate motor return",
        "weight bearing to normalize tone",
        "tactile facilitation for motor control",
    ],
    "Postural control training": [
        "trunk alignment training",
        "cervical/thoracic extension training",
        "scapular positioning",
        "pelvic alignment training",
    ],
}

ACTIVITY_OPTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {category: tuple(options) for category, options in _ACTIVITY_OPTIONS.items()}
)


# ── Phrase lists ──────────────────────────────────────────────────────────────

PARAMETERS: tuple[str, ...] = (
    # Trials
    "x3 trials",
    "x5 trials",
    "x6 trials",
    "x10 trials",
    "6/6 trials",
    "10/10 trials",
    # Reps & Sets
    "2x6 reps",
    "2x8 reps",
    "2x10 reps",
    "2x12 reps",
    "3x10 reps",
    "3x15 reps",
    "10 reps x 3 sets",
    "15 reps x 3 sets",
    # Duration
    "for 5 minutes",
    "for 8 minutes",
    "for 10 minutes",
    "for 15 minutes",
    # Items/Distance
    "8/8 items retrieved",
    "10/10 items retrieved",
    "4/4 clothespins",
    "8/8 knots untied",
    "50 ft",
    # Bilateral
    "bilaterally",
    "alternating R/L",
    # Rest breaks
    "with 1 rest break",
    "with 2 rest breaks",
    "with short recovery periods",
    "with multiple rest breaks 2/2 decreased endurance",
)

CUEING_TYPES: tuple[str, ...] = (
    "min verbal cues",
    "mod verbal cues",
    "max verbal cues",
    "intermittent verbal cues",
    "min tactile cues",
    "mod tactile cues",
    "tactile facilitation",
    "physical guidance",
    "min physical assist",
    "mod physical assist",
    "hand-over-hand assist",
    "demonstrations",
    "visual cues",
    "graded cues",
    "repeated instructions",
    "multiple trials",
)

CUEING_LOCATIONS: tuple[str, ...] = (
    "at trunk",
    "at hips",
    "at pelvis",
    "at core",
    "at thoracic spine",
    "at scapula",
    "at shoulders",
    "at knees",
    "at quads",
    "at glutes",
    "at obliques",
    "at hamstrings",
    "at thumb pad",
    "at PIPs",
    "at DIPs",
    "at humeral head",
    "at pelvic girdle",
    "at elbow",
    "at wrist",
    "on spine",
    "to block B feet",
    "to block B knees",
    "on LUE",
    "on RUE",
    "on LE",
    "to hand",
    "to feet",
)

PATIENT_RESPONSES: tuple[str, ...] = (
    # Understanding/Carryover
    "verbalized understanding",
    "verbalized understanding of importance of pacing",
    "demonstrated good understanding of techniques",
    "demonstrated carryover from previous session",
    # Improvement
    "demonstrated improved performance",
    "demonstrated improved technique by close of session",
    "showed improved performance compared to prior session",
    "required decreased cueing by end of session",
    "reduced cueing from 5 to 2 prompts by end of session",
    # Task Completion
    "completed task with noted improvement",
    "achieved task completion independently",
    "able to complete task with improved quality",
    # Safety/Stability
    "no loss of balance or instability noted",
    "demonstrated appropriate safety awareness",
    "good ability to complete tasks noted",
    # Challenges
    "required multiple attempts before success",
    "difficulty noted requiring graded cues",
    "exhibited fatigue toward end of session",
    "showed frustration but persisted",
    "difficulty completing task noted",
    "required increased time for processing",
    # Progress
    "continues to make good progress toward therapeutic goals",
    "good progress noted this session",
)

PLAN_OPTIONS: tuple[str, ...] = (
    "Continue current POC",
    "Continue to address ADL training",
    "Continue dressing training",
    "Continue balance training",
    "Continue transfer training",
    "Progress ADL training",
    "Progress balance activities",
    "Progress strengthening exercises",
    "Progress to LB dressing next session",
    "Progress to standing activities",
    "Grade activity by reducing assistance",
    "Grade activity by increasing complexity",
    "Introduce HEP",
    "Update HEP",
    "Introduce energy conservation techniques",
    "Caregiver training next session",
    "Focus on safety awareness",
    "D/C planning initiated",
    "Reassess goals",
)

PROGRESSION_OPTIONS: tuple[str, ...] = (
    "Progressed from seated to standing",
    "Progressed from bilateral to unilateral support",
    "Progressed from firm to compliant surface",
    "Progressed from narrow to wide BOS",
    "Progressed from static to dynamic activities",
    "Progressed to increased resistance",
    "Progressed to increased distance/height",
    "Progressed to outside BOS reaching",
    "Upgraded to heavier weights",
    "Upgraded to increased reps/sets",
    "Upgraded to unsupported sitting",
    "Upgraded from sitting to standing",
    "Modified to reduce ROM",
    "Modified to decrease resistance",
    "Modified to reduce cognitive load",
    "Modified to single-step instructions",
    "Downgraded from standing to seated",
    "Downgraded to decreased reps/sets",
    "Task graded to incorporate [specify]",
    "Activity graded by [specify]",
)

PROGRESSION_RATIONALE: tuple[str, ...] = (
    "as patient is at 70% of 1 rep max",
    "due to improved balance",
    "due to improved strength",
    "due to patient complaining of pain",
    "to reduce fall risk",
    "to reduce cognitive load",
    "to challenge patient appropriately",
    "to promote carryover",
    "to increase difficulty",
    "to facilitate progression toward goals",
    "due to fatigue",
    "due to decreased endurance",
    "due to LOB during dynamic tasks",
    "as muscles fatigued easily",
    "to prevent injury",
    "to accommodate pain level",
)

COMPENSATION_PATTERNS: tuple[str, ...] = (
    "as patient was compensating with trunk flexion",
    "as patient was compensating with upper back",
    "as patient was compensating with increased speed",
    "as patient was compensating with momentum",
    "as patient was compensating with lateral lean",
    "as patient was compensating with UE pull",
    "as patient was compensating with upper trapezius",
    "as patient was compensating with lumbar extension",
    "to decrease substitution methods",
    "to reduce compensatory movements",
    "with less compensation noted",
    "with reduced upper trapezius compensation",
    "to prevent compensation patterns",
)

CLINICAL_OBSERVATIONS: tuple[str, ...] = (
    "demonstrating good balance",
    "demonstrating improved control",
    "demonstrating fair balance",
    "demonstrating decreased control",
    "difficulty noted when reaching above shoulder height",
    "most difficulty noted when reaching above 140 degrees",
    "difficulty noted requiring graded cues",
    "muscles fatigued easily",
    "patient would lean away from LE that was lifting",
    "patient using more speed than muscle recruitment",
    "patient began persevering",
    "intention tremors noted",
    "with mild impact on task completion",
    "patient presents with lateral lean",
    "patient presents with forward flexed trunk",
    "patient presents with foot drop",
    "patient presents with lateral sway",
    "LOB noted during dynamic tasks",
    "no LOB noted",
    "decreased weight bearing on one side noted",
)

ACTIVITY_MODIFICATIONS: tuple[str, ...] = (
    "Patient unable to perform [X] therefore adapted to [Y]",
    "Modified routine by presenting one step at a time",
    "Modified to reduce pain",
    "Modified for safety",
    "Modified for proper body mechanics",
    "Activity adapted for decreased endurance",
    "Activity adapted for decreased ROM",
    "Task modified for cognitive impairment",
)
