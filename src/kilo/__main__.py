from kilo.cli.main import main

main()
