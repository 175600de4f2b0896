from lwc_scaffold.cli import main

main()
