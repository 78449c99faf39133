from campus_map.server import main

main()
