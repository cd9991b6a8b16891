"""Pydantic models for Benkyou API requests and responses."""

from pydantic import BaseModel, Field

from services.forms import Word, WordType


# ============================================================================
# Request Models
# ============================================================================


class WordModel(BaseModel):
    """Dictionary entry as supplied by the search layer."""
    kanji: str = Field("", max_length=50, description="Dictionary form (may be kana only)")
    kana: str = Field("", max_length=50, description="Reading in kana")
    type: WordType = Field(..., description="Word class, e.g. Ichidan, Godan, i-adjective")
    romaji: str = Field("", description="Romanized reading (passthrough)")
    meaning: str = Field("", description="English gloss (passthrough)")
    jlpt: str | None = Field(None, description="Proficiency tag such as N5 (passthrough)")

    def to_word(self) -> Word:
        return Word(
            kanji=self.kanji,
            kana=self.kana,
            type=self.type,
            romaji=self.romaji,
            meaning=self.meaning,
            jlpt=self.jlpt,
        )


class ConjugateRequest(BaseModel):
    """Request body for conjugation."""
    word: WordModel
    forms: list[str] | None = Field(None, description="Specific forms to return (optional)")


class ExplainRequest(BaseModel):
    """Request body for rule explanation."""
    word_type: str = Field(..., description="Word class")
    form: str = Field(..., description="Form name, e.g. past or teForm")


class DrillFormRequest(BaseModel):
    """Request body for picking a drill form."""
    word_type: WordType = Field(..., description="Word class")


class PromptStemRequest(BaseModel):
    """Request body for a fill-in-the-blank cue."""
    word: WordModel
    form: str = Field("present", description="Target form")


class DrillQuestionRequest(BaseModel):
    """Request body for a multiple-choice question."""
    word: WordModel
    form: str | None = Field(None, description="Target form (random when omitted)")


# ============================================================================
# Response Models
# ============================================================================


class ConjugateResponse(BaseModel):
    """Response for /conjugate."""
    word: str = Field(..., description="Dictionary form")
    word_type: str = Field(..., description="Word class")
    conjugations: dict[str, str] = Field(..., description="Form -> conjugated word ('' if not applicable)")


class ExplainResponse(BaseModel):
    """Response for /explain."""
    word_type: str
    form: str
    rule: str


class DrillFormResponse(BaseModel):
    """Response for /drill/form."""
    word_type: str
    form: str


class PromptStemResponse(BaseModel):
    """Response for /drill/stem."""
    stem: str


class DrillQuestionResponse(BaseModel):
    """Response for /drill/question."""
    word: WordModel
    target_form: str
    stem: str = Field(..., description="Fill-in-the-blank cue")
    correct_answer: str
    options: list[str] = Field(default_factory=list, description="Shuffled answer choices")
    rule: str = Field("", description="How the target form is built")
