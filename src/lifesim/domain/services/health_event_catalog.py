from __future__ import annotations

from collections.abc import Mapping, Sequence

from lifesim.domain.models.health_event import HealthEventDefinition, Severity


HEALTH_EVENT_CATALOG: Sequence[HealthEventDefinition] = (
    HealthEventDefinition(
        id="health-1",
        title="Common Cold",
        description="You've caught a common cold. You'll need some over-the-counter medication and rest.",
        severity=Severity.MINOR,
        base_cost=25,
        health_impact=-5,
        recovery_time_days=3,
        preventable=True,
    ),
    HealthEventDefinition(
        id="health-2",
        title="Mild Food Poisoning",
        description="Something you ate didn't agree with you. You'll need some medication to settle your stomach.",
        severity=Severity.MINOR,
        base_cost=40,
        health_impact=-8,
        recovery_time_days=2,
        preventable=True,
    ),
    HealthEventDefinition(
        id="health-3",
        title="Seasonal Allergies",
        description="Pollen season hit you hard. You need antihistamines to manage the symptoms.",
        severity=Severity.MINOR,
        base_cost=35,
        health_impact=-3,
        recovery_time_days=7,
        stress_impact=5,
    ),
    HealthEventDefinition(
        id="health-4",
        title="Minor Headache Condition",
        description="You've been experiencing recurring headaches. The doctor recommends medication and reducing screen time.",
        severity=Severity.MINOR,
        base_cost=75,
        health_impact=-5,
        stress_impact=10,
        preventable=True,
    ),
    HealthEventDefinition(
        id="health-5",
        title="Mild Dehydration",
        description="Your neglect of proper hydration has resulted in dehydration. You need electrolyte drinks and rest.",
        severity=Severity.MINOR,
        base_cost=30,
        health_impact=-7,
        recovery_time_days=1,
        preventable=True,
    ),
    HealthEventDefinition(
        id="health-6",
        title="Minor Sprain",
        description="You've sprained your ankle. You'll need to rest it and may need a brace.",
        severity=Severity.MINOR,
        base_cost=120,
        health_impact=-5,
        recovery_time_days=7,
    ),
    HealthEventDefinition(
        id="health-7",
        title="Ear Infection",
        description="You've developed an ear infection. Antibiotics should clear it up.",
        severity=Severity.MINOR,
        base_cost=85,
        health_impact=-7,
        recovery_time_days=5,
    ),
    HealthEventDefinition(
        id="health-8",
        title="Minor Skin Condition",
        description="A rash has developed on your skin. You need medicated cream to treat it.",
        severity=Severity.MINOR,
        base_cost=50,
        health_impact=-2,
        recovery_time_days=5,
    ),
    HealthEventDefinition(
        id="health-9",
        title="Eye Strain",
        description="Too much screen time has caused eye strain. You need eye drops and should reduce screen time.",
        severity=Severity.MINOR,
        base_cost=45,
        health_impact=-3,
        preventable=True,
        stress_impact=5,
    ),
    HealthEventDefinition(
        id="health-10",
        title="Minor Vitamin Deficiency",
        description="Blood tests show you have a vitamin deficiency. You need supplements.",
        severity=Severity.MINOR,
        base_cost=65,
        health_impact=-5,
        preventable=True,
    ),
    HealthEventDefinition(
        id="health-11",
        title="Insomnia Episode",
        description="You're having trouble sleeping. You need sleep aids and better sleep hygiene.",
        severity=Severity.MINOR,
        base_cost=70,
        health_impact=-8,
        stress_impact=15,
        preventable=True,
    ),
    HealthEventDefinition(
        id="health-12",
        title="Minor Back Pain",
        description="You're experiencing back pain from poor posture. You need pain relievers and should improve your ergonomics.",
        severity=Severity.MINOR,
        base_cost=60,
        health_impact=-5,
        preventable=True,
    ),
    HealthEventDefinition(
        id="health-13",
        title="Influenza",
        description="You've caught the flu. You'll need prescription medication, rest, and may miss work.",
        severity=Severity.MODERATE,
        base_cost=250,
        health_impact=-15,
        recovery_time_days=7,
        stress_impact=10,
    ),
    HealthEventDefinition(
        id="health-14",
        title="Moderate Infection",
        description="You've developed an infection that requires antibiotics and medical attention.",
        severity=Severity.MODERATE,
        base_cost=320,
        health_impact=-12,
        recovery_time_days=10,
    ),
    HealthEventDefinition(
        id="health-15",
        title="Minor Fracture",
        description="You've fractured a small bone. You'll need a cast and follow-up appointments.",
        severity=Severity.MODERATE,
        base_cost=850,
        health_impact=-15,
        recovery_time_days=30,
        stress_impact=15,
    ),
    HealthEventDefinition(
        id="health-16",
        title="Moderate Digestive Disorder",
        description="You've developed a digestive disorder requiring medication and dietary changes.",
        severity=Severity.MODERATE,
        base_cost=375,
        health_impact=-10,
        chronic_effect=True,
        preventable=True,
    ),
    HealthEventDefinition(
        id="health-17",
        title="Sleep Apnea",
        description="You've been diagnosed with sleep apnea. You need a CPAP machine and follow-up care.",
        severity=Severity.MODERATE,
        base_cost=1200,
        health_impact=-8,
        chronic_effect=True,
        preventable=True,
        special_effects=("Reduced energy recovery",),
    ),
    HealthEventDefinition(
        id="health-18",
        title="Repetitive Strain Injury",
        description="You've developed RSI from repetitive movements. You need therapy and ergonomic equipment.",
        severity=Severity.MODERATE,
        base_cost=550,
        health_impact=-10,
        recovery_time_days=30,
        preventable=True,
        chronic_effect=True,
    ),
    HealthEventDefinition(
        id="health-19",
        title="Moderate Breathing Issues",
        description="You're experiencing breathing difficulties. You need an inhaler and medical consultation.",
        severity=Severity.MODERATE,
        base_cost=420,
        health_impact=-12,
        chronic_effect=True,
        special_effects=("Reduced physical activity options",),
    ),
    HealthEventDefinition(
        id="health-20",
        title="Kidney Stones",
        description="You've developed kidney stones. You need medical intervention to pass them safely.",
        severity=Severity.MODERATE,
        base_cost=1100,
        health_impact=-20,
        recovery_time_days=14,
        stress_impact=25,
    ),
    HealthEventDefinition(
        id="health-21",
        title="Migraine Condition",
        description="You've been diagnosed with migraines. You need prescription medication and lifestyle changes.",
        severity=Severity.MODERATE,
        base_cost=450,
        health_impact=-12,
        chronic_effect=True,
        stress_impact=20,
        special_effects=("Occasional work disruption",),
    ),
    HealthEventDefinition(
        id="health-22",
        title="Mild Depression",
        description="You've been diagnosed with mild depression. You need therapy and possibly medication.",
        severity=Severity.MODERATE,
        base_cost=600,
        health_impact=-10,
        stress_impact=25,
        chronic_effect=True,
        special_effects=("Reduced happiness recovery",),
    ),
    HealthEventDefinition(
        id="health-23",
        title="Moderate Anxiety Disorder",
        description="You're experiencing anxiety that's affecting your daily life. You need therapy and treatment.",
        severity=Severity.MODERATE,
        base_cost=580,
        health_impact=-8,
        stress_impact=30,
        chronic_effect=True,
        special_effects=("Increased stress from events",),
    ),
    HealthEventDefinition(
        id="health-24",
        title="Gout",
        description="You've developed gout. You need medication and dietary changes.",
        severity=Severity.MODERATE,
        base_cost=380,
        health_impact=-12,
        chronic_effect=True,
        preventable=True,
    ),
    HealthEventDefinition(
        id="health-25",
        title="Moderate Allergic Reaction",
        description="You've had a significant allergic reaction. You need emergency medication and follow-up care.",
        severity=Severity.MODERATE,
        base_cost=500,
        health_impact=-15,
        recovery_time_days=5,
    ),
    HealthEventDefinition(
        id="health-26",
        title="Pneumonia",
        description="You've developed pneumonia. You need hospitalization and intensive treatment.",
        severity=Severity.SEVERE,
        base_cost=4500,
        health_impact=-25,
        recovery_time_days=21,
        requires_hospitalization=True,
        stress_impact=20,
    ),
    HealthEventDefinition(
        id="health-27",
        title="Major Fracture",
        description="You've severely fractured a major bone. You need surgery and extensive rehabilitation.",
        severity=Severity.SEVERE,
        base_cost=8500,
        health_impact=-30,
        recovery_time_days=60,
        requires_hospitalization=True,
        stress_impact=25,
    ),
    HealthEventDefinition(
        id="health-28",
        title="Severe Infection",
        description="You've developed a severe infection requiring IV antibiotics and hospitalization.",
        severity=Severity.SEVERE,
        base_cost=7000,
        health_impact=-35,
        recovery_time_days=14,
        requires_hospitalization=True,
    ),
    HealthEventDefinition(
        id="health-29",
        title="Appendicitis",
        description="Your appendix has become inflamed and requires emergency surgery.",
        severity=Severity.SEVERE,
        base_cost=12000,
        health_impact=-30,
        recovery_time_days=21,
        requires_hospitalization=True,
    ),
    HealthEventDefinition(
        id="health-30",
        title="Severe Digestive Disorder",
        description="You've developed a serious digestive condition requiring surgery and ongoing treatment.",
        severity=Severity.SEVERE,
        base_cost=9500,
        health_impact=-25,
        chronic_effect=True,
        requires_hospitalization=True,
    ),
    HealthEventDefinition(
        id="health-31",
        title="Severe Skin Condition",
        description="You've developed a serious skin condition requiring specialized treatment.",
        severity=Severity.SEVERE,
        base_cost=5500,
        health_impact=-20,
        chronic_effect=True,
        special_effects=("Reduced social interaction options",),
    ),
    HealthEventDefinition(
        id="health-32",
        title="Severe Depression",
        description="You're experiencing severe depression. You need intensive therapy and medication.",
        severity=Severity.SEVERE,
        base_cost=4800,
        health_impact=-20,
        stress_impact=40,
        chronic_effect=True,
        special_effects=("Severely reduced happiness recovery", "Limited social options"),
    ),
    HealthEventDefinition(
        id="health-33",
        title="Severe Back Injury",
        description="You've severely injured your back. You need surgery and extensive physical therapy.",
        severity=Severity.SEVERE,
        base_cost=14000,
        health_impact=-35,
        recovery_time_days=90,
        requires_hospitalization=True,
        chronic_effect=True,
    ),
    HealthEventDefinition(
        id="health-34",
        title="Severe Allergic Reaction",
        description="You've had a severe allergic reaction requiring emergency care and hospitalization.",
        severity=Severity.SEVERE,
        base_cost=7500,
        health_impact=-30,
        recovery_time_days=7,
        requires_hospitalization=True,
    ),
    HealthEventDefinition(
        id="health-35",
        title="Early Diabetes",
        description="You've been diagnosed with diabetes. You need medication, monitoring equipment, and lifestyle changes.",
        severity=Severity.SEVERE,
        base_cost=3500,
        health_impact=-15,
        chronic_effect=True,
        preventable=True,
        special_effects=("Ongoing medication costs", "Dietary restrictions"),
    ),
    HealthEventDefinition(
        id="health-36",
        title="Severe Anxiety Disorder",
        description="You're experiencing debilitating anxiety. You need intensive therapy and medication.",
        severity=Severity.SEVERE,
        base_cost=4200,
        health_impact=-15,
        stress_impact=45,
        chronic_effect=True,
        special_effects=("Limited work and social options",),
    ),
    HealthEventDefinition(
        id="health-37",
        title="Chronic Pain Condition",
        description="You've developed a chronic pain condition. You need ongoing pain management and therapy.",
        severity=Severity.SEVERE,
        base_cost=6500,
        health_impact=-25,
        chronic_effect=True,
        special_effects=("Ongoing medication costs", "Reduced quality of life"),
    ),
    HealthEventDefinition(
        id="health-38",
        title="Ulcers",
        description="You've developed stomach ulcers. You need medication and significant dietary changes.",
        severity=Severity.SEVERE,
        base_cost=4100,
        health_impact=-20,
        chronic_effect=True,
        preventable=True,
    ),
    HealthEventDefinition(
        id="health-39",
        title="Heart Attack",
        description="You've suffered a heart attack. You need emergency care, surgery, and ongoing treatment.",
        severity=Severity.CRITICAL,
        base_cost=75000,
        health_impact=-50,
        recovery_time_days=180,
        requires_hospitalization=True,
        chronic_effect=True,
        preventable=True,
        special_effects=("Permanent cardiac monitoring", "Strict lifestyle restrictions"),
    ),
    HealthEventDefinition(
        id="health-40",
        title="Stroke",
        description="You've suffered a stroke. You need emergency care, rehabilitation, and long-term support.",
        severity=Severity.CRITICAL,
        base_cost=85000,
        health_impact=-60,
        recovery_time_days=365,
        requires_hospitalization=True,
        chronic_effect=True,
        preventable=True,
        special_effects=("Permanent physical limitations", "Cognitive therapy required"),
    ),
    HealthEventDefinition(
        id="health-41",
        title="Major Organ Failure",
        description="One of your major organs is failing. You need emergency medical intervention and possibly a transplant.",
        severity=Severity.CRITICAL,
        base_cost=150000,
        health_impact=-70,
        recovery_time_days=180,
        requires_hospitalization=True,
        chronic_effect=True,
        wealth_multiplier=0.5,
        special_effects=("Permanent medical monitoring", "Lifetime medication"),
    ),
    HealthEventDefinition(
        id="health-42",
        title="Cancer Diagnosis",
        description="You've been diagnosed with cancer. You need surgery, chemotherapy, and long-term treatment.",
        severity=Severity.CRITICAL,
        base_cost=120000,
        health_impact=-55,
        recovery_time_days=365,
        requires_hospitalization=True,
        chronic_effect=True,
        wealth_multiplier=0.4,
        special_effects=("Ongoing treatment costs", "Physical limitations"),
    ),
    HealthEventDefinition(
        id="health-43",
        title="Major Vehicle Accident",
        description="You've been in a serious accident causing multiple injuries. You need emergency surgery and rehabilitation.",
        severity=Severity.CRITICAL,
        base_cost=95000,
        health_impact=-65,
        recovery_time_days=240,
        requires_hospitalization=True,
        chronic_effect=True,
    ),
    HealthEventDefinition(
        id="health-44",
        title="Severe Mental Health Crisis",
        description="You're experiencing a severe mental health crisis requiring immediate intervention.",
        severity=Severity.CRITICAL,
        base_cost=40000,
        health_impact=-40,
        stress_impact=70,
        recovery_time_days=180,
        requires_hospitalization=True,
        chronic_effect=True,
        special_effects=("Limited work and social functioning", "Ongoing therapy required"),
    ),
    HealthEventDefinition(
        id="health-45",
        title="Respiratory Failure",
        description="Your lungs are failing. You need emergency intervention and possibly assisted breathing.",
        severity=Severity.CRITICAL,
        base_cost=70000,
        health_impact=-60,
        recovery_time_days=120,
        requires_hospitalization=True,
        chronic_effect=True,
        special_effects=("Permanent respiratory support", "Limited physical activity"),
    ),
    HealthEventDefinition(
        id="health-46",
        title="Neurological Disorder",
        description="You've developed a serious neurological disorder affecting your movement and coordination.",
        severity=Severity.CRITICAL,
        base_cost=65000,
        health_impact=-45,
        chronic_effect=True,
        special_effects=("Mobility assistance required", "Ongoing therapy"),
    ),
    HealthEventDefinition(
        id="health-47",
        title="Acute Liver Damage",
        description="Your liver has sustained significant damage. You need intensive medical care and lifestyle changes.",
        severity=Severity.CRITICAL,
        base_cost=55000,
        health_impact=-50,
        recovery_time_days=90,
        requires_hospitalization=True,
        chronic_effect=True,
        preventable=True,
    ),
    HealthEventDefinition(
        id="health-48",
        title="Severe Infection with Complications",
        description="You have a life-threatening infection with multiple complications. You need ICU care.",
        severity=Severity.CRITICAL,
        base_cost=80000,
        health_impact=-65,
        recovery_time_days=60,
        requires_hospitalization=True,
    ),
    HealthEventDefinition(
        id="health-49",
        title="Autoimmune Disease",
        description="You've been diagnosed with a serious autoimmune disease requiring lifelong treatment.",
        severity=Severity.CRITICAL,
        base_cost=45000,
        health_impact=-40,
        chronic_effect=True,
        special_effects=("Immune system permanently compromised", "Ongoing medication required"),
    ),
    HealthEventDefinition(
        id="health-50",
        title="Emergency Surgery",
        description="You need emergency surgery for a life-threatening condition.",
        severity=Severity.CRITICAL,
        base_cost=60000,
        health_impact=-55,
        recovery_time_days=45,
        requires_hospitalization=True,
    ),
)


def _index_by_severity(catalog: Sequence[HealthEventDefinition]) -> Mapping[Severity, tuple[HealthEventDefinition, ...]]:
    grouped: dict[Severity, list[HealthEventDefinition]] = {severity: [] for severity in Severity}
    for definition in catalog:
        grouped[definition.severity].append(definition)
    return {severity: tuple(rows) for severity, rows in grouped.items()}


_EVENTS_BY_SEVERITY = _index_by_severity(HEALTH_EVENT_CATALOG)
_EVENTS_BY_ID = {definition.id: definition for definition in HEALTH_EVENT_CATALOG}


class HealthEventCatalog:
    """Read-only view over a fixed set of health event definitions."""

    def __init__(self, definitions: Sequence[HealthEventDefinition] | None = None) -> None:
        if definitions is None:
            self._definitions = tuple(HEALTH_EVENT_CATALOG)
            self._by_severity = _EVENTS_BY_SEVERITY
            self._by_id = _EVENTS_BY_ID
            return
        self._definitions = tuple(definitions)
        self._by_severity = _index_by_severity(self._definitions)
        self._by_id = {definition.id: definition for definition in self._definitions}

    def __len__(self) -> int:
        return len(self._definitions)

    def all(self) -> tuple[HealthEventDefinition, ...]:
        return self._definitions

    def get(self, event_id: str) -> HealthEventDefinition | None:
        return self._by_id.get(str(event_id or ""))

    def for_severity(self, severity: Severity | str) -> tuple[HealthEventDefinition, ...]:
        return self._by_severity.get(Severity.normalize(severity), ())
