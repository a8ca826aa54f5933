# Generated manually for the catalog tables

import apps.core.models
from decimal import Decimal
from django.core.validators import MinValueValidator
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='PuntoVenta',
            fields=[
                ('id', models.CharField(default=apps.core.models.new_id, max_length=36, primary_key=True, serialize=False)),
                ('codigo', models.CharField(max_length=20, unique=True)),
                ('nombre', models.CharField(max_length=200)),
                ('tipo_servicio', models.CharField(choices=[('CAFETERIA', 'Cafetería'), ('RESTAURANTE', 'Restaurante'), ('ESPECIALIZADO', 'Especializado'), ('CATERING_INTERNO', 'Catering interno'), ('CATERING_EXTERNO', 'Catering externo'), ('VENDING', 'Vending')], max_length=20)),
                ('ubicacion', models.CharField(max_length=200)),
                ('estado', models.CharField(choices=[('ACTIVO', 'Activo'), ('INACTIVO', 'Inactivo')], default='ACTIVO', max_length=10)),
                ('fecha_creacion', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'puntos_venta',
                'ordering': ['codigo'],
                'verbose_name': 'punto de venta',
                'verbose_name_plural': 'puntos de venta',
            },
        ),
        migrations.CreateModel(
            name='Producto',
            fields=[
                ('id', models.CharField(default=apps.core.models.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('codigo', models.CharField(max_length=50, unique=True)),
                ('nombre', models.CharField(max_length=200)),
                ('descripcion', models.TextField(blank=True, null=True)),
                ('categoria', models.CharField(db_index=True, max_length=100)),
                ('precio', models.DecimalField(decimal_places=2, max_digits=14, validators=[MinValueValidator(Decimal('0.01'))])),
                ('disponible', models.BooleanField(default=True)),
                ('fecha_creacion', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'productos',
                'ordering': ['categoria', 'nombre'],
            },
        ),
    ]
