"""Option lists for the select inputs of the entity forms.

A :class:`ResourceSelection` loads every row of one list endpoint and turns
it into ``{"value", "label", "item"}`` options; lookups by id and by field
value work on the loaded rows without going back to the server.
"""

import logging

from exports import format_money

from .server_pagination import ServerPagination

logger = logging.getLogger(__name__)

API = "/.netlify/functions"


class ResourceSelection:
    def __init__(self, endpoint, id_key, label_fn, fetch=None, auto_fetch=True,
                 error_text="Échec du chargement", timeout=10.0):
        self.endpoint = endpoint
        self.id_key = id_key
        self.label_fn = label_fn
        self.error_text = error_text
        self.items = []
        self.loading = False
        self.error = None
        self._source = ServerPagination(endpoint, fetch=fetch, auto_fetch=False, timeout=timeout)
        if auto_fetch:
            self.refetch()

    def refetch(self) -> None:
        self.loading = True
        self.error = None
        try:
            self.items = self._source.fetch_all()
        except Exception as exc:  # noqa: BLE001  (shown to the user, the list stays empty)
            logger.warning("loading %s failed: %s", self.endpoint, exc)
            self.error = str(exc) or self.error_text
            self.items = []
        finally:
            self.loading = False

    def options(self) -> list:
        return [
            {"value": item.get(self.id_key), "label": self.label_fn(item), "item": item}
            for item in self.items
        ]

    def get_by_id(self, item_id):
        for item in self.items:
            if str(item.get(self.id_key)) == str(item_id):
                return item
        return None

    def filter_by(self, key: str, value) -> list:
        return [item for item in self.items if item.get(key) == value]


def _vehicle_label(vehicle):
    return f"{vehicle.get('licensePlate')} - {vehicle.get('brand')} {vehicle.get('model')}"


def vehicle_selection(**kwargs) -> ResourceSelection:
    kwargs.setdefault("error_text", "Échec du chargement des véhicules")
    return ResourceSelection(f"{API}/vehicle-vehicles", "vehicleId", _vehicle_label, **kwargs)


def available_vehicles(selection: ResourceSelection) -> list:
    return selection.filter_by("status", "AVAILABLE")


def equipment_selection(**kwargs) -> ResourceSelection:
    kwargs.setdefault("error_text", "Échec du chargement des équipements")
    return ResourceSelection(
        f"{API}/equipment-equipment", "equipmentId",
        lambda e: f"{e.get('name')} - {e.get('brand')}", **kwargs,
    )


def users_selection(**kwargs) -> ResourceSelection:
    kwargs.setdefault("error_text", "Échec du chargement des utilisateurs")
    return ResourceSelection(
        f"{API}/personnel-users", "id",
        lambda u: f"{u.get('firstName')} {u.get('lastName')}", **kwargs,
    )


def offre_dao_selection(**kwargs) -> ResourceSelection:
    kwargs.setdefault("error_text", "Échec du chargement des DAO")
    return ResourceSelection(
        f"{API}/offre-dao", "daoId",
        lambda dao: f"{dao.get('daoNumber')} - {dao.get('clientname')}", **kwargs,
    )


def _ami_label(ami):
    obj = ami.get("object") or ""
    return f"{ami.get('name')} - {obj[:50]}..."


def offre_ami_selection(**kwargs) -> ResourceSelection:
    kwargs.setdefault("error_text", "Échec du chargement des AMI")
    return ResourceSelection(f"{API}/offre-ami", "amiId", _ami_label, **kwargs)


def offre_devis_selection(**kwargs) -> ResourceSelection:
    kwargs.setdefault("error_text", "Échec du chargement des devis")
    return ResourceSelection(
        f"{API}/offre-devis", "devisId",
        lambda d: f"{d.get('indexNumber')} - {format_money(d.get('amount'), d.get('devise') or 'XAF')}",
        **kwargs,
    )
