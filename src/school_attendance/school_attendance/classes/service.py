from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_choice, require_non_empty, validate_all
from ..core.constants import GRADES, SECTIONS
from ..core.exceptions import ValidationError
from .model import ClassDraft, SchoolClass
from .repository import ClassRepository

logger = logging.getLogger(__name__)


class ClassService:
    """Use cases of the Class Directory screen."""

    def __init__(self, classes: ClassRepository):
        self._classes = classes

    def list_classes(self) -> Sequence[SchoolClass]:
        return list(self._classes.list_all())

    def get(self, class_id: int) -> Optional[SchoolClass]:
        for c in self._classes.list_all():
            if c.class_id == int(class_id):
                return c
        return None

    def build_draft(
        self,
        *,
        name: Optional[str],
        grade: Optional[str],
        section: Optional[str],
        teacher_name: Optional[str],
    ) -> ClassDraft:
        values = validate_all(
            {
                "name": lambda: require_non_empty(name, "name"),
                "grade": lambda: require_choice(grade, "grade", GRADES),
                "section": lambda: require_choice(section, "section", SECTIONS),
                "teacher_name": lambda: require_non_empty(teacher_name, "teacher_name"),
            }
        )
        return ClassDraft(**values)

    def save(self, *, class_id: Optional[int] = None, **fields) -> ClassDraft:
        draft = self.build_draft(**fields)
        if class_id is None:
            self._classes.create(draft)
            logger.info("Created class %s", draft.name)
        else:
            if int(class_id) <= 0:
                raise ValidationError("Class does not exist")
            self._classes.update(int(class_id), draft)
            logger.info("Updated class %s", class_id)
        return draft

    def delete(self, class_id: int) -> None:
        if int(class_id) <= 0:
            raise ValidationError("Class does not exist")
        self._classes.delete(int(class_id))
        logger.info("Deleted class %s", class_id)
