"""Config: settings por domínio e logging estruturado."""
