from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Postes opérateurs utilisés pour la gestion des droits."""

    BOSS = "Boss"
    GERANT = "Gérant"
    CHEF = "Chef de Cuisine"
    MAGASINIER = "Magasinier"
    CAISSIER = "Caissier"
    RECEPTIONNISTE = "Réceptionniste"


class Site(str, Enum):
    """Sites physiques. Le siège social n'a pas de données d'exploitation."""

    FNIDEQ = "Fnideq"
    MDIQ = "M'diq"
    AL_HOCEIMA = "Al Hoceima"
    SIEGE = "Siège Social"

    @classmethod
    def operational(cls) -> list["Site"]:
        return [cls.FNIDEQ, cls.MDIQ, cls.AL_HOCEIMA]


class ActivityAction(str, Enum):
    LOGIN = "Connexion"
    LOGOUT = "Déconnexion"


class StockCategory(str, Enum):
    DAIRY = "Produits Laitiers"
    BUTCHERY = "Boucherie"
    GROCERY = "Épicerie"
    BAKERY = "Boulangerie"
    PRODUCE = "Fruits & Légumes"
    CLEANING = "Entretien"
    OTHER = "Autre"


class StockUnit(str, Enum):
    KG = "Kg"
    LITRE = "L"
    UNIT = "Unité"
    PACK = "Pack"


class CommandStatus(str, Enum):
    PENDING = "En attente"
    DELIVERED = "Livré"


class MealCategory(str, Enum):
    BREAKFAST = "Petit-Déjeuner"
    LUNCH = "Déjeuner"
    SNACK = "Goûter"
    DINNER = "Dîner"


class VoucherType(str, Enum):
    MEAL = "Repas"
    BEVERAGE = "Boisson"


class VoucherStatus(str, Enum):
    VALID = "Valide"
    CONSUMED = "Consommé"
    CANCELLED = "Annulé"


class ApartmentType(str, Enum):
    SUITE = "Suite"
    APARTMENT = "Appartement"
    STUDIO = "Studio"


class ApartmentStatus(str, Enum):
    FREE = "Libre"
    OCCUPIED = "Occupé"
    CLEANING = "Ménage"
    MAINTENANCE = "Maintenance"


class AccommodationType(str, Enum):
    """Formule d'hébergement; le dénominateur donne le nombre d'occupants."""

    SINGLE = "1/1 Single"
    DOUBLE = "1/2 Double"
    TRIPLE = "1/3 Triple"
    QUADRUPLE = "1/4 Quadruple"

    @property
    def occupants(self) -> int:
        return int(self.value.split(" ")[0].split("/")[1])


class LaundryStatus(str, Enum):
    PENDING = "En attente"
    WASHING = "En blanchisserie"
    AT_RECEPTION = "En réception"
    DELIVERED = "Livré"

    def next(self) -> "LaundryStatus | None":
        flow = list(LaundryStatus)
        idx = flow.index(self) + 1
        return flow[idx] if idx < len(flow) else None


class AttendanceStatus(str, Enum):
    PRESENT = "Présent"
    ABSENT = "Absent"
    JUSTIFIED = "Justifié"


class StaffStatus(str, Enum):
    ON_DUTY = "En poste"
    ON_LEAVE = "En congé"
    MIDDAY = "Midi"


class CashType(str, Enum):
    ENTRY = "Entrée"
    EXPENSE = "Sortie"
