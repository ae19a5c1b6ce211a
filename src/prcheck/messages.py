"""Localized text for the incomplete-PR comment."""

from __future__ import annotations

import logging
from enum import Enum

from prcheck.exceptions import ConfigError

logger = logging.getLogger("prcheck.messages")

DEFAULT_LANGUAGE = "pt"


class MessageKey(str, Enum):
    """Every string the comment template needs."""

    TITLE = "title"
    INTRO = "intro"
    MILESTONE_MISSING = "milestone_missing"
    ASSIGNEES_MISSING = "assignees_missing"
    LABELS_MISSING = "labels_missing"
    IMPORTANCE = "importance"
    MILESTONE_IMPORTANCE = "milestone_importance"
    ASSIGNEES_IMPORTANCE = "assignees_importance"
    LABELS_IMPORTANCE = "labels_importance"
    HOW_TO_RESOLVE = "how_to_resolve"
    STEP1 = "step1"
    STEP2 = "step2"
    STEP3 = "step3"
    FOOTER = "footer"


MESSAGES: dict[str, dict[MessageKey, str]] = {
    "pt": {
        MessageKey.TITLE: "Campos obrigatórios ausentes",
        MessageKey.INTRO: "Neste PR estão faltando os seguintes campos obrigatórios:",
        MessageKey.MILESTONE_MISSING: "🔹 **Milestone**",
        MessageKey.ASSIGNEES_MISSING: "👤 **Assignees**",
        MessageKey.LABELS_MISSING: "🏷️ **Labels**",
        MessageKey.IMPORTANCE: "Por que isso é importante?",
        MessageKey.MILESTONE_IMPORTANCE: "ajudam a acompanhar o progresso das entregas do projeto.",
        MessageKey.ASSIGNEES_IMPORTANCE: "deixam claro quem é responsável por este PR.",
        MessageKey.LABELS_IMPORTANCE: "facilitam a categorização e a busca de PRs.",
        MessageKey.HOW_TO_RESOLVE: "Como resolver",
        MessageKey.STEP1: "Na barra lateral do PR, selecione uma milestone.",
        MessageKey.STEP2: "Atribua pelo menos uma pessoa responsável em *Assignees*.",
        MessageKey.STEP3: "Adicione pelo menos uma label que descreva a mudança.",
        MessageKey.FOOTER: "Por favor, adicione-os para manter a organização do projeto.",
    },
    "en": {
        MessageKey.TITLE: "Missing required fields",
        MessageKey.INTRO: "This PR is missing the following required fields:",
        MessageKey.MILESTONE_MISSING: "🔹 **Milestone**",
        MessageKey.ASSIGNEES_MISSING: "👤 **Assignees**",
        MessageKey.LABELS_MISSING: "🏷️ **Labels**",
        MessageKey.IMPORTANCE: "Why does this matter?",
        MessageKey.MILESTONE_IMPORTANCE: "help track the progress of project deliveries.",
        MessageKey.ASSIGNEES_IMPORTANCE: "make it clear who is responsible for this PR.",
        MessageKey.LABELS_IMPORTANCE: "make PRs easier to categorize and search.",
        MessageKey.HOW_TO_RESOLVE: "How to resolve",
        MessageKey.STEP1: "Pick a milestone in the PR sidebar.",
        MessageKey.STEP2: "Assign at least one person under *Assignees*.",
        MessageKey.STEP3: "Add at least one label describing the change.",
        MessageKey.FOOTER: "Please add them to keep the project organized.",
    },
    "es": {
        MessageKey.TITLE: "Faltan campos obligatorios",
        MessageKey.INTRO: "A este PR le faltan los siguientes campos obligatorios:",
        MessageKey.MILESTONE_MISSING: "🔹 **Milestone**",
        MessageKey.ASSIGNEES_MISSING: "👤 **Assignees**",
        MessageKey.LABELS_MISSING: "🏷️ **Labels**",
        MessageKey.IMPORTANCE: "¿Por qué es importante?",
        MessageKey.MILESTONE_IMPORTANCE: "ayudan a seguir el progreso de las entregas del proyecto.",
        MessageKey.ASSIGNEES_IMPORTANCE: "dejan claro quién es responsable de este PR.",
        MessageKey.LABELS_IMPORTANCE: "facilitan la categorización y la búsqueda de PRs.",
        MessageKey.HOW_TO_RESOLVE: "Cómo resolverlo",
        MessageKey.STEP1: "Selecciona una milestone en la barra lateral del PR.",
        MessageKey.STEP2: "Asigna al menos una persona responsable en *Assignees*.",
        MessageKey.STEP3: "Añade al menos una label que describa el cambio.",
        MessageKey.FOOTER: "Por favor, añádelos para mantener el proyecto organizado.",
    },
}


def validate_messages(
    tables: dict[str, dict[MessageKey, str]] | None = None,
) -> None:
    """Check that every language defines every message.

    Raises:
        ConfigError: Naming each incomplete language and its missing keys.
    """
    tables = MESSAGES if tables is None else tables
    if DEFAULT_LANGUAGE not in tables:
        raise ConfigError(f"Default language '{DEFAULT_LANGUAGE}' has no messages")

    problems = []
    for language, table in tables.items():
        missing = [key.value for key in MessageKey if not table.get(key)]
        if missing:
            problems.append(f"{language}: {', '.join(missing)}")

    if problems:
        raise ConfigError("Incomplete message tables - " + "; ".join(problems))


def get_messages(language: str | None = None) -> dict[MessageKey, str]:
    """Return the message table for `language`, or the default one."""
    if language and language in MESSAGES:
        return MESSAGES[language]
    if language:
        logger.warning(f"No messages for '{language}', using '{DEFAULT_LANGUAGE}'")
    return MESSAGES[DEFAULT_LANGUAGE]


def supported_languages() -> list[str]:
    return sorted(MESSAGES)
