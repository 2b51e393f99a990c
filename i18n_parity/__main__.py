from i18n_parity.main import run

run()
