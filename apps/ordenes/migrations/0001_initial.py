# Generated manually for the order tables

import apps.core.models
import django.core.validators
import django.db.models.deletion
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalogo', '0001_initial'),
        ('usuarios', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Orden',
            fields=[
                ('id', models.CharField(default=apps.core.models.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('numero', models.PositiveBigIntegerField(unique=True)),
                ('fecha', models.DateTimeField(auto_now_add=True)),
                ('subtotal', models.DecimalField(decimal_places=2, max_digits=14)),
                ('impuestos', models.DecimalField(decimal_places=2, default=Decimal('0'), max_digits=14)),
                ('total', models.DecimalField(decimal_places=2, max_digits=14)),
                ('metodo_pago', models.CharField(blank=True, max_length=30, null=True)),
                ('metodo_validacion', models.CharField(blank=True, max_length=30, null=True)),
                ('estado', models.CharField(choices=[('PENDIENTE', 'Pendiente'), ('PREPARANDO', 'Preparando'), ('COMPLETADA', 'Completada'), ('CANCELADA', 'Cancelada')], default='COMPLETADA', max_length=12)),
                ('punto_venta', models.ForeignKey(db_column='id_punto_venta', on_delete=django.db.models.deletion.PROTECT, related_name='ordenes', to='catalogo.puntoventa')),
                ('usuario', models.ForeignKey(db_column='cedula', on_delete=django.db.models.deletion.PROTECT, related_name='ordenes', to='usuarios.usuario')),
            ],
            options={
                'db_table': 'ordenes',
                'ordering': ['-numero'],
                'verbose_name': 'orden',
                'verbose_name_plural': 'órdenes',
            },
        ),
        migrations.CreateModel(
            name='DetalleOrden',
            fields=[
                ('id', models.CharField(default=apps.core.models.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('cantidad', models.PositiveIntegerField(validators=[django.core.validators.MinValueValidator(1)])),
                ('precio_unitario', models.DecimalField(decimal_places=2, max_digits=14)),
                ('subtotal', models.DecimalField(decimal_places=2, max_digits=14)),
                ('notas', models.TextField(blank=True, null=True)),
                ('orden', models.ForeignKey(db_column='id_orden', on_delete=django.db.models.deletion.CASCADE, related_name='detalles', to='ordenes.orden')),
                ('producto', models.ForeignKey(db_column='id_producto', on_delete=django.db.models.deletion.PROTECT, related_name='detalles', to='catalogo.producto')),
            ],
            options={
                'db_table': 'detalle_ordenes',
                'verbose_name': 'detalle de orden',
                'verbose_name_plural': 'detalles de orden',
            },
        ),
    ]
