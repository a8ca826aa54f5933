# Generated manually for the audit and regulatory configuration tables

import apps.core.models
import django.core.serializers.json
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Auditoria',
            fields=[
                ('id', models.CharField(default=apps.core.models.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('tabla', models.CharField(max_length=100)),
                ('id_registro', models.CharField(max_length=100)),
                ('accion', models.CharField(choices=[('INSERT', 'Insert'), ('UPDATE', 'Update'), ('DELETE', 'Delete')], max_length=10)),
                ('usuario', models.CharField(blank=True, max_length=100, null=True)),
                ('cedula_relacionada', models.CharField(blank=True, max_length=20, null=True)),
                ('fecha_hora', models.DateTimeField(auto_now_add=True)),
                ('datos_anteriores', models.JSONField(blank=True, encoder=django.core.serializers.json.DjangoJSONEncoder, null=True)),
                ('datos_nuevos', models.JSONField(blank=True, encoder=django.core.serializers.json.DjangoJSONEncoder, null=True)),
                ('ip_origen', models.GenericIPAddressField(blank=True, null=True)),
            ],
            options={
                'db_table': 'auditoria',
                'ordering': ['-fecha_hora'],
                'indexes': [
                    models.Index(fields=['tabla', 'id_registro'], name='auditoria_tabla_registro_idx'),
                    models.Index(fields=['fecha_hora'], name='auditoria_fecha_hora_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ConfiguracionNormativa',
            fields=[
                ('id', models.CharField(default=apps.core.models.new_id, editable=False, max_length=36, primary_key=True, serialize=False)),
                ('parametro', models.CharField(max_length=100, unique=True)),
                ('valor', models.TextField()),
                ('descripcion', models.TextField(blank=True, null=True)),
                ('resolucion_aplicable', models.CharField(blank=True, max_length=100, null=True)),
                ('fecha_vigencia', models.DateField(blank=True, null=True)),
                ('activo', models.BooleanField(default=True)),
                ('fecha_actualizacion', models.DateTimeField(auto_now=True)),
            ],
            options={
                'db_table': 'configuracion_normativa',
                'ordering': ['parametro'],
            },
        ),
    ]
