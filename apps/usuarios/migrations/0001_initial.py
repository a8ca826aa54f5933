# Generated manually for the user tables

import apps.core.models
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('catalogo', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Usuario',
            fields=[
                ('cedula', models.CharField(max_length=20, primary_key=True, serialize=False)),
                ('tipo_documento', models.CharField(choices=[('CC', 'Cédula de ciudadanía'), ('TI', 'Tarjeta de identidad'), ('CE', 'Cédula de extranjería'), ('PA', 'Pasaporte')], default='CC', max_length=5)),
                ('nombre', models.CharField(max_length=200)),
                ('telefono', models.CharField(blank=True, max_length=30, null=True)),
                ('correo', models.EmailField(db_index=True, max_length=254)),
                ('codigo_qr', models.CharField(blank=True, max_length=100, null=True, unique=True)),
                ('fecha_registro', models.DateTimeField(auto_now_add=True)),
                ('validacion_legal', models.BooleanField(default=False)),
                ('fecha_validacion_legal', models.DateTimeField(blank=True, null=True)),
                ('terminos_aceptados', models.BooleanField(default=False)),
                ('fecha_aceptacion_terminos', models.DateTimeField(blank=True, null=True)),
                ('estado', models.CharField(choices=[('ACTIVO', 'Activo'), ('INACTIVO', 'Inactivo'), ('BLOQUEADO', 'Bloqueado')], default='ACTIVO', max_length=10)),
            ],
            options={
                'db_table': 'usuarios',
                'ordering': ['nombre'],
            },
        ),
        migrations.CreateModel(
            name='ValidacionAcceso',
            fields=[
                ('id', models.CharField(default=apps.core.models.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('cedula', models.CharField(db_index=True, max_length=20)),
                ('metodo_validacion', models.CharField(choices=[('QR', 'Código QR'), ('CEDULA', 'Cédula'), ('MANUAL', 'Manual')], max_length=10)),
                ('fecha_hora', models.DateTimeField(auto_now_add=True)),
                ('exitosa', models.BooleanField()),
                ('ip_validacion', models.GenericIPAddressField(blank=True, null=True)),
                ('mensaje_error', models.TextField(blank=True, null=True)),
                ('punto_venta', models.ForeignKey(blank=True, db_column='id_punto_venta', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='validaciones', to='catalogo.puntoventa')),
            ],
            options={
                'db_table': 'validaciones_acceso',
                'ordering': ['-fecha_hora'],
                'verbose_name': 'validación de acceso',
                'verbose_name_plural': 'validaciones de acceso',
            },
        ),
    ]
