"""Pure derivations from a CassandraDatacenter: images, config, ports, racks."""
