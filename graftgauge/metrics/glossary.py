"""
Graft flow metric glossary: metric key -> plain English explanation.
"""

METRIC_GLOSSARY: dict[str, str] = {
    "MF": (
        "Mean Flow -- the average volume of blood moving through the graft "
        "each minute. Higher values generally mean the graft is working well."
    ),
    "PI": (
        "Pulsatility Index -- how much the flow swings between its highest "
        "and lowest point, relative to the average. Lower values mean a "
        "steadier flow pattern."
    ),
    "DF": (
        "Diastolic Filling -- the share of flow that happens while the heart "
        "muscle relaxes between beats. Coronary grafts fill mostly during "
        "this phase, so higher is better."
    ),
    "BF": (
        "Backflow -- the share of flow moving the wrong way through the "
        "graft. Lower values mean flow is going in one direction."
    ),
    "ACI": (
        "Acoustic Coupling Index -- how well the ultrasound probe is in "
        "contact with the vessel. A low value means the other readings may "
        "not be reliable."
    ),
    "MAP": (
        "Mean Arterial Pressure -- the average blood pressure during the "
        "measurement. Flow readings are easiest to interpret when pressure "
        "is in a normal range."
    ),
}
