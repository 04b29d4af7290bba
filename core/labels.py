# =============================================================================
# core/labels.py  —  Display labels for the API's enumerated codes
# =============================================================================
#
# The API speaks in codes ("ROUND_1", "MISE_EN_EXAMEN", "DEPUTE", ...).  The
# reports speak French.  Each table below is a closed mapping; label() falls
# back to the code itself, so a code added on the API side still renders
# (as its raw value) instead of failing.
#
# The same code tuples feed the Literal types in core/schemas.py, so the
# values an agent may pass as filters are exactly the keys below.
# =============================================================================

from typing import Mapping, Optional


def label(table: Mapping[str, str], code: Optional[str]) -> str:
    """Look up `code`; unknown codes are returned unchanged."""
    if code is None:
        return ""
    return table.get(code, code)


# -----------------------------------------------------------------------------
# Elections
# -----------------------------------------------------------------------------
ELECTION_TYPES: dict[str, str] = {
    "PRESIDENTIELLE": "Présidentielle",
    "LEGISLATIVES": "Législatives",
    "SENATORIALES": "Sénatoriales",
    "MUNICIPALES": "Municipales",
    "DEPARTEMENTALES": "Départementales",
    "REGIONALES": "Régionales",
    "EUROPEENNES": "Européennes",
    "REFERENDUM": "Référendum",
}

ELECTION_STATUSES: dict[str, str] = {
    "UPCOMING": "À venir",
    "REGISTRATION": "Inscriptions ouvertes",
    "CANDIDACIES": "Dépôt des candidatures",
    "CAMPAIGN": "Campagne en cours",
    "ROUND_1": "1er tour",
    "BETWEEN_ROUNDS": "Entre-deux-tours",
    "ROUND_2": "2nd tour",
    "COMPLETED": "Terminée",
}

ELECTION_SCOPES: dict[str, str] = {
    "NATIONAL": "Nationale",
    "REGIONAL": "Régionale",
    "DEPARTMENTAL": "Départementale",
    "MUNICIPAL": "Municipale",
    "EUROPEAN": "Européenne",
}

SUFFRAGE_TYPES: dict[str, str] = {
    "DIRECT": "Suffrage universel direct",
    "INDIRECT": "Suffrage universel indirect",
}

# -----------------------------------------------------------------------------
# Votes
# -----------------------------------------------------------------------------
VOTE_RESULTS: dict[str, str] = {
    "ADOPTED": "Adopté",
    "REJECTED": "Rejeté",
}

VOTE_POSITIONS: dict[str, str] = {
    "POUR": "Pour",
    "CONTRE": "Contre",
    "ABSTENTION": "Abstention",
    "NON_VOTANT": "Non votant",
    "ABSENT": "Absent",
}

CHAMBERS: dict[str, str] = {
    "AN": "Assemblée nationale",
    "SENAT": "Sénat",
}

ALL_CHAMBERS = "Toutes chambres"

# -----------------------------------------------------------------------------
# Politicians
# -----------------------------------------------------------------------------
MANDATE_TYPES: dict[str, str] = {
    "PRESIDENT_REPUBLIQUE": "Président(e) de la République",
    "PREMIER_MINISTRE": "Premier(ère) ministre",
    "MINISTRE": "Ministre",
    "SECRETAIRE_ETAT": "Secrétaire d'État",
    "DEPUTE": "Député(e)",
    "SENATEUR": "Sénateur(rice)",
    "DEPUTE_EUROPEEN": "Député(e) européen(ne)",
    "PRESIDENT_REGION": "Président(e) de région",
    "CONSEILLER_REGIONAL": "Conseiller(ère) régional(e)",
    "PRESIDENT_DEPARTEMENT": "Président(e) de département",
    "CONSEILLER_DEPARTEMENTAL": "Conseiller(ère) départemental(e)",
    "MAIRE": "Maire",
    "ADJOINT_MAIRE": "Adjoint(e) au maire",
    "CONSEILLER_MUNICIPAL": "Conseiller(ère) municipal(e)",
}

# -----------------------------------------------------------------------------
# Affairs
# -----------------------------------------------------------------------------
AFFAIR_STATUSES: dict[str, str] = {
    "ENQUETE_PRELIMINAIRE": "Enquête préliminaire",
    "INSTRUCTION": "Information judiciaire",
    "MISE_EN_EXAMEN": "Mise en examen",
    "RENVOI_TRIBUNAL": "Renvoi devant le tribunal",
    "PROCES_EN_COURS": "Procès en cours",
    "CONDAMNATION_PREMIERE_INSTANCE": "Condamnation en première instance",
    "APPEL_EN_COURS": "Appel en cours",
    "CONDAMNATION_DEFINITIVE": "Condamnation définitive",
    "RELAXE": "Relaxe",
    "ACQUITTEMENT": "Acquittement",
    "NON_LIEU": "Non-lieu",
    "PRESCRIPTION": "Prescription",
    "CLASSEMENT_SANS_SUITE": "Classement sans suite",
}

AFFAIR_CATEGORIES: dict[str, str] = {
    "CORRUPTION": "Corruption",
    "TRAFIC_INFLUENCE": "Trafic d'influence",
    "PRISE_ILLEGALE_INTERETS": "Prise illégale d'intérêts",
    "DETOURNEMENT_FONDS_PUBLICS": "Détournement de fonds publics",
    "EMPLOI_FICTIF": "Emploi fictif",
    "FINANCEMENT_ILLEGAL": "Financement illégal de campagne",
    "FRAUDE_FISCALE": "Fraude fiscale",
    "BLANCHIMENT": "Blanchiment",
    "HARCELEMENT": "Harcèlement",
    "VIOLENCES": "Violences",
    "DIFFAMATION": "Diffamation",
    "AUTRE": "Autre",
}

# Events on an affair's timeline.
AFFAIR_EVENT_TYPES: dict[str, str] = {
    "PLAINTE": "Plainte",
    "ENQUETE": "Ouverture d'enquête",
    "PERQUISITION": "Perquisition",
    "GARDE_A_VUE": "Garde à vue",
    "MISE_EN_EXAMEN": "Mise en examen",
    "RENVOI": "Renvoi",
    "PROCES": "Procès",
    "JUGEMENT": "Jugement",
    "APPEL": "Appel",
    "CASSATION": "Cassation",
}

# -----------------------------------------------------------------------------
# Legislation
# -----------------------------------------------------------------------------
LEGISLATION_STATUSES: dict[str, str] = {
    "DEPOSE": "Déposé",
    "EN_COMMISSION": "En commission",
    "EN_SEANCE": "En séance publique",
    "NAVETTE": "En navette parlementaire",
    "ADOPTE": "Adopté",
    "PROMULGUE": "Promulgué",
    "REJETE": "Rejeté",
    "RETIRE": "Retiré",
    "CADUC": "Caduc",
}

LEGISLATION_CATEGORIES: dict[str, str] = {
    "ECONOMIE": "Économie",
    "BUDGET": "Budget et finances publiques",
    "SOCIAL": "Social",
    "SANTE": "Santé",
    "EDUCATION": "Éducation",
    "ENVIRONNEMENT": "Environnement",
    "JUSTICE": "Justice",
    "SECURITE": "Sécurité",
    "INSTITUTIONS": "Institutions",
    "INTERNATIONAL": "International",
    "NUMERIQUE": "Numérique",
    "AUTRE": "Autre",
}
