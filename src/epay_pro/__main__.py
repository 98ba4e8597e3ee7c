from epay_pro.cli import run

run()
