"""
Office model.
"""
from django.db import models


class Office(models.Model):
    """
    A physical office/location licensees are assigned to.
    """

    name = models.CharField(max_length=50, help_text="Office name")
    city = models.CharField(max_length=50)
    state = models.CharField(max_length=50)
    active = models.BooleanField(default=True, db_index=True)
    version = models.PositiveIntegerField(default=0)

    class Meta:
        db_table = "offices"
        ordering = ["name"]

    def __str__(self):
        return self.name
