"""Database column types (JSON and AES-GCM encrypted) and a cursor row scanner."""