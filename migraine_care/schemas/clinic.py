"""
Migraine Care — Клінічна схема (пацієнт → сесія → лікування)

Назви полів на дроті — колонки backend (іспанською),
атрибути Python — англійською через alias.
"""

import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


SESSION_TYPES = ("Inicial", "Seguimiento", "Urgencia")
DISABILITY_LEVELS = ("Leve", "Moderado", "Severo")

DEFAULT_PRESCRIPTION_FREQUENCY = "За призначенням"


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class Patient(_WireModel):
    """Пацієнт"""
    id: Optional[int] = None
    code: str = Field(default="", alias="codigo_paciente")
    full_name: str = Field(..., alias="nombre_completo")
    gender: Optional[str] = Field(default=None, alias="genero")
    birth_date: Optional[datetime.date] = Field(default=None, alias="fecha_nacimiento")
    email: Optional[str] = Field(default=None, alias="correo_electronico")
    phone: Optional[str] = Field(default=None, alias="telefono")

    def age(self, today: Optional[datetime.date] = None) -> Optional[int]:
        """Повних років на дату today"""
        if not self.birth_date:
            return None
        today = today or datetime.date.today()
        years = today.year - self.birth_date.year
        if (today.month, today.day) < (self.birth_date.month, self.birth_date.day):
            years -= 1
        return years


class Treatment(_WireModel):
    """Лікування з довідника"""
    id: int
    name: str = Field(..., alias="nombre_tratamiento")
    common_dose: Optional[str] = Field(default=None, alias="dosis_comun")


class PrescribedTreatment(_WireModel):
    """Призначене в сесії лікування"""
    treatment_id: int = Field(..., alias="tratamiento_id")
    treatment_name: str = Field(..., alias="nombre_tratamiento")
    dose: str = Field(default="", alias="dosis_prescrita")
    frequency: str = Field(default=DEFAULT_PRESCRIPTION_FREQUENCY, alias="frecuencia_prescrita")
    duration_days: int = Field(default=30, ge=0, alias="duracion_dias")
    is_final: bool = Field(default=False, alias="es_tratamiento_final")

    @classmethod
    def from_treatment(cls, treatment: Treatment) -> "PrescribedTreatment":
        return cls(
            treatment_id=treatment.id,
            treatment_name=treatment.name,
            dose=treatment.common_dose or "",
        )


class SessionSymptoms(_WireModel):
    headache: str = Field(default="", alias="dolor_cabeza")
    nausea: bool = Field(default=False, alias="nauseas")
    photophobia: bool = Field(default=False, alias="fotofobia")
    phonophobia: bool = Field(default=False, alias="fonofobia")


class SessionTriggers(_WireModel):
    stress: bool = Field(default=False, alias="estres")
    lack_of_sleep: bool = Field(default=False, alias="falta_sueno")
    foods: List[str] = Field(default_factory=list, alias="alimentos")


class CurrentMedication(_WireModel):
    medications: List[str] = Field(default_factory=list, alias="medicamentos")


class ClinicalKPIs(_WireModel):
    """KPI клінічної сесії"""
    pain_intensity: int = Field(default=5, ge=0, le=10, alias="intensidad_dolor")
    episode_frequency: int = Field(default=0, ge=0, alias="frecuencia_episodios")
    duration_hours: float = Field(default=0, ge=0, alias="duracion_horas")
    disability_level: str = Field(default="Moderado", alias="nivel_discapacidad")
    quality_of_life: int = Field(default=5, ge=0, le=10, alias="puntaje_calidad_vida")
    lost_work_days: int = Field(default=0, ge=0, alias="dias_trabajo_perdidos")
    sleep_quality: int = Field(default=3, ge=1, le=5, alias="calidad_sueno")


class ClinicalSession(_WireModel):
    """
    Клінічна сесія пацієнта.

    Приклад:
        session = ClinicalSession.new(patient_id=1)
        session.add_treatment(treatment)
        session.set_final_treatment(0)
    """
    id: Optional[int] = None
    patient_id: int = Field(..., alias="paciente_id")
    session_date: datetime.date = Field(default_factory=datetime.date.today, alias="fecha_sesion")
    session_type: str = Field(default="Seguimiento", alias="tipo_sesion")

    symptoms: SessionSymptoms = Field(default_factory=SessionSymptoms, alias="sintomas")
    triggers: SessionTriggers = Field(default_factory=SessionTriggers, alias="desencadenantes")
    current_medication: CurrentMedication = Field(
        default_factory=CurrentMedication, alias="medicacion_actual"
    )

    migraine_type: str = Field(default="", alias="tipo_migrana")
    aura_present: bool = Field(default=False, alias="aura_presente")
    chronic_condition: bool = Field(default=False, alias="condicion_cronica")
    final_diagnosis: str = Field(default="", alias="diagnostico_final")

    kpis: ClinicalKPIs = Field(default_factory=ClinicalKPIs)
    prescribed_treatments: List[PrescribedTreatment] = Field(
        default_factory=list, alias="tratamientos_prescritos"
    )

    # Відповіді AI (1 = DeepSeek, 2 = OpenAI)
    ai1_diagnosis: Optional[str] = Field(default=None, alias="diagnostico_ia_1")
    ai1_treatment: Optional[str] = Field(default=None, alias="tratamiento_ia_1")
    ai1_confidence: Optional[float] = Field(default=None, ge=0, le=1, alias="confianza_ia_1")
    ai2_diagnosis: Optional[str] = Field(default=None, alias="diagnostico_ia_2")
    ai2_treatment: Optional[str] = Field(default=None, alias="tratamiento_ia_2")
    ai2_confidence: Optional[float] = Field(default=None, ge=0, le=1, alias="confianza_ia_2")

    @classmethod
    def new(cls, patient_id: int) -> "ClinicalSession":
        return cls(patient_id=patient_id)

    @property
    def is_saved(self) -> bool:
        return self.id is not None

    @property
    def has_ai_confidences(self) -> bool:
        return bool(self.ai1_confidence) and bool(self.ai2_confidence)

    @property
    def final_treatment(self) -> Optional[PrescribedTreatment]:
        for treatment in self.prescribed_treatments:
            if treatment.is_final:
                return treatment
        return None

    def add_treatment(self, treatment: Treatment) -> PrescribedTreatment:
        prescribed = PrescribedTreatment.from_treatment(treatment)
        self.prescribed_treatments.append(prescribed)
        return prescribed

    def remove_treatment(self, index: int) -> PrescribedTreatment:
        return self.prescribed_treatments.pop(index)

    def set_final_treatment(self, index: int) -> None:
        """Позначити одне лікування як остаточне (інші — ні)"""
        if not 0 <= index < len(self.prescribed_treatments):
            raise IndexError(f"No prescribed treatment at index {index}")
        for i, treatment in enumerate(self.prescribed_treatments):
            treatment.is_final = i == index

    def consultation_payload(self) -> dict:
        """Дані, які надсилаються на AI-консультацію"""
        data = self.to_payload()
        keys = ("sintomas", "desencadenantes", "medicacion_actual", "kpis", "tipo_migrana")
        return {key: data[key] for key in keys}
