from odm.collection.model import Collection
from odm.validation.regex import Regex
from odm.validation.validation import Validation


class Robot(Collection):
    source = "robots"

    def initialize(self):
        # poziva se samo za prvu instancu klase
        self.set_connection_service("mongoRobots")
        self.use_implicit_object_ids(True)

    def before_save(self):
        self.saved_hook_called = True

    def validation(self) -> bool:
        validation = Validation()
        validation.add("code", Regex({
            "pattern": r"^[A-Z]{2}-[0-9]{3}$",
            "message": "Robot code ':field' must look like AB-123",
        }))
        validation.add("built_at", Regex({
            "pattern": r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$",
            "allow_empty": True,
        }))
        return self.validate(validation)
