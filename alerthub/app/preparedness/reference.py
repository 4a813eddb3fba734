"""
Static preparedness reference shipped with the service.

Served read-only from /api/reference/safety-tips. None of this lives in the
database: it changes with releases, not with user activity.
"""

from __future__ import annotations

from typing import Dict, List

EMERGENCY_NUMBERS: Dict[str, Dict[str, str]] = {
    "US": {
        "emergency": "911",
        "poison": "1-800-222-1222",
        "disaster": "1-800-621-3362",
    },
    "international": {
        "emergency": "112",
    },
}

SAFETY_TIPS: Dict[str, List[str]] = {
    "earthquake": [
        "Drop to your hands and knees",
        "Take cover under a sturdy desk or table",
        "Hold on and protect your head and neck",
        "If outdoors, move away from buildings and power lines",
        "Do not run outside during shaking",
    ],
    "wildfire": [
        "Evacuate immediately if ordered",
        "Follow designated evacuation routes",
        "Close all windows and doors",
        "Turn off propane tanks and pilot lights",
        "Take your emergency kit and important documents",
    ],
    "flood": [
        "Move to higher ground immediately",
        "Avoid walking or driving through flood waters",
        "Stay away from downed power lines",
        "Listen to emergency broadcasts",
        "Do not drink flood water",
    ],
    "storm": [
        "Stay indoors and away from windows",
        "Secure outdoor furniture and objects",
        "Have flashlights and batteries ready",
        "Avoid using electrical appliances",
        "Monitor weather alerts",
    ],
}

EMERGENCY_KIT_ESSENTIALS: List[str] = [
    "Water (1 gallon per person per day for 3 days)",
    "Non-perishable food (3-day supply)",
    "Battery-powered or hand crank radio",
    "Flashlight and extra batteries",
    "First aid kit",
    "Whistle for signaling help",
    "Dust masks and plastic sheeting",
    "Moist towelettes and garbage bags",
    "Wrench or pliers to turn off utilities",
    "Manual can opener",
    "Local maps",
    "Cell phone with chargers",
    "Cash in small bills",
    "Emergency contact information",
    "Copies of important documents",
    "Sleeping bags and blankets",
    "Change of clothing and sturdy shoes",
    "Fire extinguisher",
    "Matches in waterproof container",
]

EVACUATION_CHECKLIST: List[str] = [
    "Grab your emergency kit",
    "Take important documents",
    "Bring medications",
    "Secure your home",
    "Follow evacuation routes",
    "Check on neighbors",
    "Stay informed via radio",
    "Do not return until safe",
]


def safety_reference() -> Dict[str, object]:
    return {
        "safety_tips": SAFETY_TIPS,
        "emergency_kit_essentials": EMERGENCY_KIT_ESSENTIALS,
        "evacuation_checklist": EVACUATION_CHECKLIST,
        "emergency_numbers": EMERGENCY_NUMBERS,
    }
