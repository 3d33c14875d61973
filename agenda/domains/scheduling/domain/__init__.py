# Scheduling Domain Layer
