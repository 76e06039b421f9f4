"""Bootstrap steps for the local WordPress docker environment.

Submodules:
- utils: logging, status output and subprocess wrappers
- workdir: working-directory state probing
- template: template download and .env creation
- salts: WordPress keys and salts
- env: .env loading, validation and the edit prompt
- docker: docker compose lifecycle
- certs: host trust for the nginx certificate
"""
