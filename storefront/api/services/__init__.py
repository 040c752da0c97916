# Service classes that run storefront reads and writes through the database client.
