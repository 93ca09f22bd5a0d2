from oilfire.cli.main import main

main()
