from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Person",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "first_name",
                    models.CharField(db_column="firstName", max_length=100),
                ),
                (
                    "last_name",
                    models.CharField(db_column="lastName", max_length=100),
                ),
                (
                    "birth_date",
                    models.DateField(blank=True, db_column="birthDate", null=True),
                ),
                ("address", models.CharField(max_length=200)),
                ("email", models.CharField(blank=True, max_length=100, null=True)),
                ("phone", models.CharField(blank=True, max_length=13, null=True)),
            ],
            options={
                "db_table": "person",
                "ordering": ["id"],
            },
        ),
    ]
