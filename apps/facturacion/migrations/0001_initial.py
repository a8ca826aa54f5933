# Generated manually for the fiscal document tables

import apps.core.models
import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('ordenes', '0001_initial'),
        ('usuarios', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='DocumentoEquivalente',
            fields=[
                ('id', models.CharField(default=apps.core.models.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('numero_documento', models.CharField(max_length=40, unique=True)),
                ('tipo_documento', models.CharField(default='DOCUMENTO_EQUIVALENTE', max_length=30)),
                ('cufe', models.CharField(blank=True, max_length=64, null=True, unique=True)),
                ('qr_documento', models.TextField(blank=True, null=True)),
                ('fecha_emision', models.DateTimeField(default=django.utils.timezone.now)),
                ('fecha_envio_correo', models.DateTimeField(blank=True, null=True)),
                ('estado_envio', models.CharField(choices=[('PENDIENTE', 'Pendiente'), ('ENVIADO', 'Enviado'), ('ERROR', 'Error')], default='PENDIENTE', max_length=10)),
                ('intentos_envio', models.PositiveIntegerField(default=0)),
                ('url_documento', models.URLField(blank=True, max_length=500, null=True)),
                ('cumple_resolucion_000165', models.BooleanField(default=True)),
                ('hash_documento', models.CharField(blank=True, max_length=64, null=True)),
                ('orden', models.OneToOneField(db_column='id_orden', on_delete=django.db.models.deletion.CASCADE, related_name='documento', to='ordenes.orden')),
            ],
            options={
                'db_table': 'documentos_equivalentes',
                'ordering': ['-fecha_emision', '-numero_documento'],
                'verbose_name': 'documento equivalente',
                'verbose_name_plural': 'documentos equivalentes',
            },
        ),
        migrations.CreateModel(
            name='Factura',
            fields=[
                ('id', models.CharField(default=apps.core.models.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('numero', models.CharField(max_length=40, unique=True)),
                ('fecha', models.DateTimeField(default=django.utils.timezone.now)),
                ('total', models.DecimalField(decimal_places=2, max_digits=14)),
                ('detalle', models.TextField(blank=True, null=True)),
                ('cufe', models.CharField(blank=True, max_length=64, null=True)),
                ('qr_factura', models.TextField(blank=True, null=True)),
                ('estado_envio', models.CharField(choices=[('PENDIENTE', 'Pendiente'), ('ENVIADO', 'Enviado'), ('ERROR', 'Error')], default='PENDIENTE', max_length=10)),
                ('orden', models.ForeignKey(blank=True, db_column='id_orden', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='facturas', to='ordenes.orden')),
                ('usuario', models.ForeignKey(db_column='cedula', on_delete=django.db.models.deletion.PROTECT, related_name='facturas', to='usuarios.usuario')),
            ],
            options={
                'db_table': 'facturas',
                'ordering': ['-fecha'],
            },
        ),
    ]
