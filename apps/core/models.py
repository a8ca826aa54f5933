from django.db import models
import uuid


def new_id():
    """Text primary key shared by every table (uuid4 string)."""
    return str(uuid.uuid4())


class Secuencia(models.Model):
    """Named monotonically increasing counter (order numbers, document numbers)."""

    clave = models.CharField(primary_key=True, max_length=100)
    valor = models.BigIntegerField(default=0)

    class Meta:
        db_table = 'secuencias'
        ordering = ['clave']

    def __str__(self):
        return f"{self.clave} = {self.valor}"
